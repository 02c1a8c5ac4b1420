"""
Dashboard rollups for one business.
"""
from dataclasses import asdict, dataclass
from decimal import Decimal

from memberdesk.repositories import (MemberRepository, MembershipRepository,
                                     PaymentRepository)
from memberdesk.utils.clock import start_of_month
from memberdesk.utils.money import to_money

from .base import BaseService, require_business


@dataclass
class DashboardStats:
    total_members: int = 0
    active_members: int = 0
    expired_members: int = 0
    renewals_due_today: int = 0
    renewals_due_this_week: int = 0
    monthly_collection: Decimal = Decimal("0.00")
    total_outstanding: Decimal = Decimal("0.00")

    def to_dict(self):
        return asdict(self)


class DashboardService(BaseService):
    """Read-only aggregation, computed fresh on every call."""

    def __init__(self, session=None, clock=None):
        super().__init__(session=session, clock=clock)
        self.members = MemberRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.payments = PaymentRepository(self.session)

    def get_stats(self, business_id):
        require_business(business_id)
        now = self.clock()

        active = self.memberships.active(business_id, now)
        expired = self.memberships.expired(business_id, now)
        due_today = self.memberships.expiring_within(business_id, now, 0)
        due_week = self.memberships.expiring_within(business_id, now, 7)

        outstanding = sum(
            (m.remaining_amount for m in active), Decimal("0.00")
        )

        return DashboardStats(
            total_members=self.members.count(business_id),
            active_members=len({m.member_id for m in active}),
            expired_members=len({m.member_id for m in expired}),
            renewals_due_today=len(due_today),
            renewals_due_this_week=len(due_week),
            monthly_collection=self.payments.total_since(business_id, start_of_month(now)),
            total_outstanding=to_money(outstanding),
        )
