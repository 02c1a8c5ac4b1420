"""
Membership model: a subscription plan assigned to a member for a time window.
"""
from datetime import timedelta
from decimal import Decimal
from enum import Enum

from sqlalchemy import Index, and_, or_

from memberdesk import db

from .base import BaseModel


class MembershipStatus(Enum):
    """Enum for membership status values."""
    ACTIVE = "active"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class Membership(BaseModel):
    """
    Membership of a member on a plan.

    ``total_amount`` is the plan price at creation time and never changes.
    ``paid_amount`` is recomputed from the payment history and only grows.

    Attributes:
        business_id (int): Owning business
        member_id (int): Foreign key to Member
        plan_id (int): Foreign key to SubscriptionPlan
        start_date (datetime): First instant covered (UTC)
        expiry_date (datetime): start_date + plan duration (UTC)
        status (str): active, expired or cancelled
        total_amount (Decimal): Plan price snapshot
        paid_amount (Decimal): Sum of payments recorded so far
        notes (str): Free-form notes
    """
    __tablename__ = 'memberships'

    business_id = db.Column(db.Integer, db.ForeignKey('businesses.id'), nullable=False)
    member_id = db.Column(db.Integer, db.ForeignKey('members.id'), nullable=False)
    plan_id = db.Column(db.Integer, db.ForeignKey('subscription_plans.id'), nullable=False)
    start_date = db.Column(db.DateTime, nullable=False)
    expiry_date = db.Column(db.DateTime, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=MembershipStatus.ACTIVE.value)
    total_amount = db.Column(db.Numeric(10, 2), nullable=False)
    paid_amount = db.Column(db.Numeric(10, 2), nullable=False, default=Decimal("0.00"))
    notes = db.Column(db.Text, nullable=True)

    __table_args__ = (
        # Overlap checks: a member's active memberships
        Index('idx_membership_member_status', 'member_id', 'status'),

        # Business-scoped listings and time-window queries
        Index('idx_membership_business_status_expiry', 'business_id', 'status', 'expiry_date'),

        # System-wide expiry sweep
        Index('idx_membership_status_expiry', 'status', 'expiry_date'),
    )

    @staticmethod
    def compute_expiry(start_date, duration_days):
        """Expiry is plain calendar-day arithmetic on the UTC start."""
        return start_date + timedelta(days=duration_days)

    @classmethod
    def overlap_clause(cls, start_date, expiry_date):
        """
        SQL expression matching rows whose [start_date, expiry_date] range
        intersects the given closed range.
        """
        return or_(
            and_(cls.start_date <= start_date, cls.expiry_date >= start_date),
            and_(cls.start_date <= expiry_date, cls.expiry_date >= expiry_date),
            and_(cls.start_date >= start_date, cls.expiry_date <= expiry_date),
        )

    def overlaps(self, start_date, expiry_date):
        """Python counterpart of overlap_clause, inclusive on both ends."""
        s1, e1 = self.start_date, self.expiry_date
        return (s1 <= start_date <= e1
                or s1 <= expiry_date <= e1
                or (start_date <= s1 and e1 <= expiry_date))

    @property
    def remaining_amount(self):
        """Amount still owed. Negative when overpaid."""
        return Decimal(self.total_amount) - Decimal(self.paid_amount or 0)

    @property
    def is_active(self):
        return self.status == MembershipStatus.ACTIVE.value

    def is_lapsed(self, now):
        """True when the membership is still active but its window has passed."""
        return self.is_active and self.expiry_date <= now

    def __repr__(self):
        return f"<Membership Member:{self.member_id} Plan:{self.plan_id} Status:{self.status}>"
