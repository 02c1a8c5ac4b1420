"""
Models package for SQLAlchemy database models.
"""
from .base import BaseModel
from .business import Business
from .member import Member
from .membership import Membership, MembershipStatus
from .notification import Notification, NotificationType
from .payment import Payment, PaymentMethod
from .subscription_plan import SubscriptionPlan
from .user import User

__all__ = [
    'BaseModel',
    'Business',
    'Member',
    'Membership',
    'MembershipStatus',
    'Notification',
    'NotificationType',
    'Payment',
    'PaymentMethod',
    'SubscriptionPlan',
    'User',
]
