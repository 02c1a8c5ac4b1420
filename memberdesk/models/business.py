"""
Business (tenant) model.
"""
from memberdesk import db

from .base import BaseModel


class Business(BaseModel):
    """
    A tenant. Owns members, plans, memberships and payments.

    Attributes:
        user_id (int): Owner account
        name (str): Display name
        currency (str): ISO currency code used for display only
    """
    __tablename__ = 'businesses'

    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.String(500), nullable=True)
    address = db.Column(db.String(500), nullable=True)
    phone = db.Column(db.String(50), nullable=True)
    email = db.Column(db.String(255), nullable=True)
    currency = db.Column(db.String(3), nullable=False, default="USD")
    tax_id = db.Column(db.String(50), nullable=True)

    def __repr__(self):
        return f"<Business {self.name}>"
