"""
Notification model for events shown to a business owner.
"""
import json
from enum import Enum

from sqlalchemy import Index

from memberdesk import db

from .base import BaseModel


class NotificationType(Enum):
    """Enum for notification types."""
    MEMBERSHIP_RENEWAL_REMINDER = "membership_renewal_reminder"
    MEMBERSHIP_EXPIRED = "membership_expired"
    PAYMENT_RECEIVED = "payment_received"
    MEMBERSHIP_CREATED = "membership_created"
    MEMBER_ADDED = "member_added"


class Notification(BaseModel):
    """
    Notification addressed to a user of a business.

    Attributes:
        user_id (int): Recipient
        business_id (int): Business the event belongs to
        type (str): One of NotificationType values
        title (str): Short title
        message (str): Human readable message
        is_read (bool): Whether the recipient has read it
        read_at (datetime): When it was marked read
        related_entity_type (str): e.g. "membership" or "payment"
        related_entity_id (int): Id of the related entity
        extra_data (str): JSON string with additional data
    """
    __tablename__ = 'notifications'

    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    business_id = db.Column(db.Integer, db.ForeignKey('businesses.id'), nullable=False)
    type = db.Column(db.String(50), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    message = db.Column(db.String(1000), nullable=False)
    is_read = db.Column(db.Boolean, nullable=False, default=False)
    read_at = db.Column(db.DateTime, nullable=True)
    related_entity_type = db.Column(db.String(50), nullable=True)
    related_entity_id = db.Column(db.Integer, nullable=True)
    extra_data = db.Column(db.Text, nullable=True)

    __table_args__ = (
        Index('idx_notification_user_read', 'user_id', 'is_read'),
    )

    def get_extra_data_dict(self):
        """Return extra_data decoded from JSON, or an empty dict."""
        if not self.extra_data:
            return {}
        return json.loads(self.extra_data)

    def mark_read(self, now):
        self.is_read = True
        self.read_at = now
        return self.touch(now)

    def __repr__(self):
        return f"<Notification {self.type} User:{self.user_id}>"
