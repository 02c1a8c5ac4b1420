"""
Member model for people tracked by a business.
"""
from sqlalchemy import Index

from memberdesk import db

from .base import BaseModel


class Member(BaseModel):
    """
    A person eligible for memberships. Deactivated, never hard deleted.

    Attributes:
        business_id (int): Owning business
        first_name (str): Given name
        last_name (str): Family name
        email (str): Contact email
        phone (str): Contact phone
        address (str): Postal address
        date_of_birth (date): Date of birth
        is_active (bool): False once deactivated
        notes (str): Free-form notes
    """
    __tablename__ = 'members'

    business_id = db.Column(db.Integer, db.ForeignKey('businesses.id'), nullable=False)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=True)
    phone = db.Column(db.String(50), nullable=True)
    address = db.Column(db.String(500), nullable=True)
    date_of_birth = db.Column(db.Date, nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    notes = db.Column(db.Text, nullable=True)

    __table_args__ = (
        Index('idx_member_business', 'business_id', 'is_deleted'),
        Index('idx_member_name', 'business_id', 'last_name', 'first_name'),
    )

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def deactivate(self, now=None):
        """Soft-deactivate the member."""
        self.is_active = False
        return self.touch(now)

    def __repr__(self):
        return f"<Member {self.full_name}>"
