"""
Storage access: one repository per entity, all bound to an explicit session.
"""
from .accounts import BusinessRepository, UserRepository
from .base import Repository
from .members import MemberRepository
from .memberships import MembershipRepository
from .notifications import NotificationRepository
from .payments import PaymentRepository
from .plans import PlanRepository

__all__ = [
    'BusinessRepository',
    'MemberRepository',
    'MembershipRepository',
    'NotificationRepository',
    'PaymentRepository',
    'PlanRepository',
    'Repository',
    'UserRepository',
]
