"""
Service-level exceptions and their HTTP mapping.
"""
import logging
from http import HTTPStatus

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, message=None):
        self.message = message or self.status_code.phrase
        super().__init__(self.message)


class NotFoundError(ServiceError):
    """Referenced record does not exist or belongs to another business."""

    status_code = HTTPStatus.NOT_FOUND


class ConflictError(ServiceError):
    """Operation conflicts with existing state, e.g. overlapping memberships."""

    status_code = HTTPStatus.CONFLICT


class ValidationError(ServiceError):
    """Input failed a domain rule."""

    status_code = HTTPStatus.BAD_REQUEST


class UnauthorizedError(ServiceError):
    """No resolvable business context for the caller."""

    status_code = HTTPStatus.UNAUTHORIZED


def register_error_handlers(api):
    """
    Register error handlers on a flask-restx Api.

    Args:
        api: The flask_restx.Api instance.
    """

    @api.errorhandler(ServiceError)
    def handle_service_error(error):
        """Render service errors as JSON with the matching status."""
        status = int(error.status_code)
        if status >= 500:
            logger.error("Service error: %s", error.message)
        else:
            logger.info("%s: %s", type(error).__name__, error.message)
        return {'message': error.message, 'status': status}, status


def register_app_error_handlers(app):
    """
    Register a catch-all handler on the Flask app for unexpected errors.

    HTTP errors keep their default handling; anything else is logged with
    its traceback and rendered as a generic 500.
    """

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return error
        logger.exception("Unhandled exception")
        status = int(HTTPStatus.INTERNAL_SERVER_ERROR)
        return jsonify({'message': 'Internal server error', 'status': status}), status
