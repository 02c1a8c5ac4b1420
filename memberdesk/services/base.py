"""
Shared plumbing for services: session, clock and transaction scope.
"""
from contextlib import contextmanager

from memberdesk import db
from memberdesk.errors import UnauthorizedError
from memberdesk.utils.clock import utcnow


class BaseService:
    """
    Base class for services.

    Args:
        session: SQLAlchemy session; defaults to the Flask-SQLAlchemy session.
        clock: Zero-argument callable returning naive UTC "now".
        notifier: Object with a ``notify`` method; defaults to
            NotificationService bound to the same session and clock.
    """

    def __init__(self, session=None, clock=None, notifier=None):
        self.session = session if session is not None else db.session
        self.clock = clock or utcnow
        self._notifier = notifier

    @property
    def notifier(self):
        if self._notifier is None:
            from .notification_service import NotificationService
            self._notifier = NotificationService(session=self.session, clock=self.clock)
        return self._notifier

    @contextmanager
    def unit_of_work(self):
        """
        Commit on success, roll back on any exception.

        Multi-step writes run inside this block so an aborted request never
        leaves partial state behind.
        """
        try:
            yield self.session
            self.session.commit()
        except BaseException:
            self.session.rollback()
            raise


def require_business(business_id):
    """Raise UnauthorizedError when the caller has no business context."""
    if business_id is None:
        raise UnauthorizedError("Business context not found")
    return business_id
