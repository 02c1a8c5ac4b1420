"""
Service layer: business rules on top of the repositories.
"""
from .auth_service import AuthService
from .business_service import BusinessService
from .dashboard_service import DashboardService, DashboardStats
from .expiry_service import ExpiryResult, ExpiryService
from .member_service import MemberService
from .membership_service import MembershipService
from .notification_service import NotificationService
from .payment_service import PaymentService
from .plan_service import PlanService

__all__ = [
    'AuthService',
    'BusinessService',
    'DashboardService',
    'DashboardStats',
    'ExpiryResult',
    'ExpiryService',
    'MemberService',
    'MembershipService',
    'NotificationService',
    'PaymentService',
    'PlanService',
]
