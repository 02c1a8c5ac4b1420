"""
Notification sink: persists events for the business owner.
"""
import json
import logging

from sqlalchemy.exc import SQLAlchemyError

from memberdesk.errors import NotFoundError
from memberdesk.models import Notification, NotificationType
from memberdesk.repositories import BusinessRepository, NotificationRepository

from .base import BaseService

logger = logging.getLogger(__name__)


class NotificationService(BaseService):
    """
    Fire-and-forget notifications.

    ``notify`` never raises: callers must not depend on delivery.
    """

    def __init__(self, session=None, clock=None):
        super().__init__(session=session, clock=clock, notifier=self)
        self.businesses = BusinessRepository(self.session)
        self.notifications = NotificationRepository(self.session)

    def notify(self, business_id, notification_type, title, message,
               related_entity_type=None, related_entity_id=None, extra_data=None):
        """
        Record a notification for the owner of ``business_id``.

        Returns:
            Notification or None when it could not be stored.
        """
        if isinstance(notification_type, NotificationType):
            notification_type = notification_type.value
        try:
            business = self.businesses.get(business_id)
            if business is None:
                logger.warning("Dropping %s notification: business %s not found",
                               notification_type, business_id)
                return None
            now = self.clock()
            notification = Notification(
                user_id=business.user_id,
                business_id=business.id,
                type=notification_type,
                title=title,
                message=message,
                related_entity_type=related_entity_type,
                related_entity_id=related_entity_id,
                extra_data=json.dumps(extra_data) if extra_data else None,
                created_at=now,
                updated_at=now,
            )
            with self.unit_of_work():
                self.notifications.add(notification)
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Failed to store %s notification for business %s",
                             notification_type, business_id)
            return None

        logger.info("Notification %s (%s) sent to user %s",
                    notification.id, notification_type, notification.user_id)
        return notification

    def list_for_user(self, user_id, unread_only=False):
        return self.notifications.for_user(user_id, unread_only=unread_only)

    def mark_as_read(self, notification_id, user_id):
        """Mark one notification read. Other users' notifications are NotFound."""
        with self.unit_of_work():
            notification = self.notifications.get_for_user(notification_id, user_id)
            if notification is None:
                raise NotFoundError("Notification not found")
            if not notification.is_read:
                notification.mark_read(self.clock())
        return notification

    def mark_all_as_read(self, user_id):
        """Mark every unread notification of the user read. Returns the count."""
        with self.unit_of_work():
            unread = self.notifications.for_user(user_id, unread_only=True)
            now = self.clock()
            for notification in unread:
                notification.mark_read(now)
        if unread:
            logger.info("Marked %d notifications as read for user %s", len(unread), user_id)
        return len(unread)
