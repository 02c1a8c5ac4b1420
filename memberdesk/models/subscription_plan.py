"""
Subscription Plan model for the plans a business sells.
"""
from sqlalchemy import Index

from memberdesk import db

from .base import BaseModel


class SubscriptionPlan(BaseModel):
    """
    Subscription plan owned by a business.

    Price and duration edits never touch existing memberships; those snapshot
    the values when they are created.

    Attributes:
        business_id (int): Owning business
        name (str): Plan name (e.g., "Monthly", "Annual")
        description (str): Plan description
        price (Decimal): Price of the plan, never negative
        duration_days (int): Length of a membership on this plan, always > 0
        is_active (bool): Whether the plan is offered
    """
    __tablename__ = 'subscription_plans'

    business_id = db.Column(db.Integer, db.ForeignKey('businesses.id'), nullable=False)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.String(500), nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    duration_days = db.Column(db.Integer, nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    __table_args__ = (
        Index('idx_subscription_plan_business', 'business_id', 'is_deleted'),
    )

    def __repr__(self):
        return f"<SubscriptionPlan {self.name} - {self.price} / {self.duration_days}d>"
