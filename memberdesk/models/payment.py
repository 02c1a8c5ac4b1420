"""
Payment model. Payments are append-only.
"""
from enum import Enum

from sqlalchemy import Index

from memberdesk import db

from .base import BaseModel


class PaymentMethod(Enum):
    """Enum for accepted payment methods."""
    CASH = "cash"
    CARD = "card"
    BANK_TRANSFER = "bank_transfer"
    MOBILE_MONEY = "mobile_money"
    ONLINE = "online"
    OTHER = "other"


class Payment(BaseModel):
    """
    A payment recorded against a membership.

    Attributes:
        business_id (int): Owning business
        membership_id (int): Foreign key to Membership
        amount (Decimal): Amount paid, always positive
        payment_date (datetime): When the payment was made (UTC)
        payment_method (str): One of PaymentMethod values
        transaction_reference (str): External reference, e.g. a card slip number
        notes (str): Free-form notes
    """
    __tablename__ = 'payments'

    business_id = db.Column(db.Integer, db.ForeignKey('businesses.id'), nullable=False)
    membership_id = db.Column(db.Integer, db.ForeignKey('memberships.id'), nullable=False)
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    payment_date = db.Column(db.DateTime, nullable=False)
    payment_method = db.Column(db.String(20), nullable=False, default=PaymentMethod.CASH.value)
    transaction_reference = db.Column(db.String(100), nullable=True)
    notes = db.Column(db.Text, nullable=True)

    __table_args__ = (
        Index('idx_payment_membership', 'membership_id', 'is_deleted'),
        Index('idx_payment_business_date', 'business_id', 'payment_date'),
    )

    def __repr__(self):
        return f"<Payment Membership:{self.membership_id} Amount:{self.amount}>"
