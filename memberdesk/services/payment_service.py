"""
Payment reconciliation.
"""
import logging

from memberdesk.errors import NotFoundError, ValidationError
from memberdesk.models import NotificationType, Payment, PaymentMethod
from memberdesk.repositories import MembershipRepository, PaymentRepository
from memberdesk.utils.clock import to_naive_utc
from memberdesk.utils.money import to_money

from .base import BaseService, require_business

logger = logging.getLogger(__name__)


def parse_payment_method(value):
    """Return the PaymentMethod value for value, or raise ValidationError."""
    if isinstance(value, PaymentMethod):
        return value.value
    try:
        return PaymentMethod(str(value).lower()).value
    except ValueError:
        allowed = ", ".join(m.value for m in PaymentMethod)
        raise ValidationError(f"Invalid payment method. Allowed: {allowed}") from None


class PaymentService(BaseService):
    """Records payments and keeps membership.paid_amount in sync."""

    def __init__(self, session=None, clock=None, notifier=None):
        super().__init__(session=session, clock=clock, notifier=notifier)
        self.memberships = MembershipRepository(self.session)
        self.payments = PaymentRepository(self.session)

    def record_payment(self, business_id, membership_id, amount, method,
                       reference=None, notes=None, payment_date=None):
        """
        Record a payment against a membership.

        ``paid_amount`` is recomputed from every stored payment for the
        membership rather than incremented. Overpayment is accepted.

        Raises:
            ValidationError: Amount not positive or unknown payment method
            NotFoundError: Membership missing or owned by another business
        """
        require_business(business_id)

        try:
            amount = to_money(amount)
        except ValueError:
            raise ValidationError("Payment amount must be a number") from None
        if amount <= 0:
            raise ValidationError("Payment amount must be greater than 0")
        method = parse_payment_method(method)

        with self.unit_of_work():
            # Row lock serializes concurrent sum-then-write on one membership
            membership = self.memberships.get(membership_id, business_id, for_update=True)
            if membership is None:
                raise NotFoundError("Membership not found")

            now = self.clock()
            payment = Payment(
                business_id=business_id,
                membership_id=membership.id,
                amount=amount,
                payment_date=to_naive_utc(payment_date) if payment_date is not None else now,
                payment_method=method,
                transaction_reference=reference,
                notes=notes,
                created_at=now,
                updated_at=now,
            )
            self.payments.add(payment)

            membership.paid_amount = self.payments.total_paid(membership.id)
            self.memberships.update(membership, now)
            paid_amount = membership.paid_amount
            remaining = membership.remaining_amount

        logger.info(
            "Recorded payment %s of %s on membership %s (paid %s, remaining %s)",
            payment.id, amount, membership_id, paid_amount, remaining
        )
        self.notifier.notify(
            business_id,
            NotificationType.PAYMENT_RECEIVED,
            title="Payment received",
            message=f"Payment of {amount} received for membership #{membership_id}",
            related_entity_type="payment",
            related_entity_id=payment.id,
            extra_data={"amount": str(amount), "remaining": str(remaining)},
        )
        return payment

    def get_payments(self, business_id, membership_id=None):
        """Payments of the business, most recent first."""
        require_business(business_id)
        return self.payments.list(business_id, membership_id=membership_id)
