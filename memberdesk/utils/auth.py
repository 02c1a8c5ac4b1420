"""
Caller context helpers.
"""
from flask_jwt_extended import get_jwt, get_jwt_identity

from memberdesk.errors import UnauthorizedError


def current_business_id():
    """
    Business id of the caller, read from the access token claims.

    The value is trusted as-is; token verification happens in jwt_required.

    Raises:
        UnauthorizedError: If the token carries no business context.
    """
    business_id = get_jwt().get('business_id')
    if business_id is None:
        raise UnauthorizedError("Business context not found")
    return int(business_id)


def current_user_id():
    identity = get_jwt_identity()
    if identity is None:
        raise UnauthorizedError("User context not found")
    return int(identity)

