"""
Payment repository.
"""
from sqlalchemy import func

from memberdesk.models import Payment
from memberdesk.utils.money import to_money

from .base import Repository


class PaymentRepository(Repository):
    model = Payment

    def list(self, business_id, membership_id=None):
        query = self._query(business_id)
        if membership_id is not None:
            query = query.filter(Payment.membership_id == membership_id)
        return query.order_by(Payment.payment_date.desc(), Payment.id.desc()).all()

    def total_paid(self, membership_id):
        """Sum of all non-deleted payments for a membership."""
        total = self._query().with_entities(
            func.coalesce(func.sum(Payment.amount), 0)
        ).filter(Payment.membership_id == membership_id).scalar()
        return to_money(total)

    def total_since(self, business_id, since):
        total = self._query(business_id).with_entities(
            func.coalesce(func.sum(Payment.amount), 0)
        ).filter(Payment.payment_date >= since).scalar()
        return to_money(total)
