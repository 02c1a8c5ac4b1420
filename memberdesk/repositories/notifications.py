"""
Notification repository.
"""
from memberdesk.models import Notification

from .base import Repository


class NotificationRepository(Repository):
    model = Notification

    def for_user(self, user_id, unread_only=False):
        query = self._query().filter(Notification.user_id == user_id)
        if unread_only:
            query = query.filter(Notification.is_read.is_(False))
        return query.order_by(Notification.created_at.desc(), Notification.id.desc()).all()

    def get_for_user(self, notification_id, user_id):
        return self._query().filter(
            Notification.id == notification_id,
            Notification.user_id == user_id,
        ).first()
