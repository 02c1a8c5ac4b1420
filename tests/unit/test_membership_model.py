"""
Unit tests for the Membership model.
"""
from datetime import datetime, timedelta
from decimal import Decimal

from memberdesk.models import Membership, MembershipStatus


def _membership(start, days=30, **kwargs):
    return Membership(
        business_id=1,
        member_id=1,
        plan_id=1,
        start_date=start,
        expiry_date=Membership.compute_expiry(start, days),
        status=kwargs.pop('status', MembershipStatus.ACTIVE.value),
        total_amount=kwargs.pop('total_amount', Decimal("29.99")),
        paid_amount=kwargs.pop('paid_amount', Decimal("0.00")),
        **kwargs,
    )


class TestMembershipModel:
    """Tests for Membership model and its helpers."""

    def test_compute_expiry_adds_calendar_days(self):
        start = datetime(2024, 1, 1)
        assert Membership.compute_expiry(start, 30) == datetime(2024, 1, 31)
        # Leap year
        assert Membership.compute_expiry(datetime(2024, 2, 1), 30) == datetime(2024, 3, 2)
        assert Membership.compute_expiry(start, 1) == datetime(2024, 1, 2)

    def test_compute_expiry_keeps_time_of_day(self):
        start = datetime(2024, 1, 1, 15, 30)
        assert Membership.compute_expiry(start, 7) == datetime(2024, 1, 8, 15, 30)

    def test_overlaps_is_inclusive_at_boundaries(self):
        membership = _membership(datetime(2024, 1, 1))
        # Starts on the existing expiry instant
        assert membership.overlaps(datetime(2024, 1, 31), datetime(2024, 3, 1)) is True
        # Ends on the existing start instant
        assert membership.overlaps(datetime(2023, 12, 1), datetime(2024, 1, 1)) is True
        # Fully contains the existing range
        assert membership.overlaps(datetime(2023, 12, 1), datetime(2024, 3, 1)) is True
        # Fully inside the existing range
        assert membership.overlaps(datetime(2024, 1, 10), datetime(2024, 1, 20)) is True

    def test_overlaps_false_for_disjoint_ranges(self):
        membership = _membership(datetime(2024, 1, 1))
        assert membership.overlaps(datetime(2024, 2, 1), datetime(2024, 3, 2)) is False
        assert membership.overlaps(
            datetime(2023, 11, 1), datetime(2024, 1, 1) - timedelta(seconds=1)
        ) is False

    def test_remaining_amount(self):
        membership = _membership(datetime(2024, 1, 1), paid_amount=Decimal("10.00"))
        assert membership.remaining_amount == Decimal("19.99")

        membership.paid_amount = Decimal("40.00")
        assert membership.remaining_amount == Decimal("-10.01")

    def test_is_lapsed(self):
        membership = _membership(datetime(2024, 1, 1))
        assert membership.is_lapsed(datetime(2024, 1, 30)) is False
        assert membership.is_lapsed(datetime(2024, 1, 31)) is True

        membership.status = MembershipStatus.CANCELLED.value
        assert membership.is_active is False
        assert membership.is_lapsed(datetime(2024, 2, 15)) is False

    def test_persisted_defaults(self, db, owner, make_member, make_plan):
        member = make_member(owner['business_id'])
        plan = make_plan(owner['business_id'])
        membership = Membership(
            business_id=owner['business_id'],
            member_id=member.id,
            plan_id=plan.id,
            start_date=datetime(2024, 1, 1),
            expiry_date=datetime(2024, 1, 31),
            total_amount=Decimal("29.99"),
        )
        db.session.add(membership)
        db.session.commit()

        assert membership.status == MembershipStatus.ACTIVE.value
        assert membership.paid_amount == Decimal("0.00")
        assert membership.is_deleted is False
        assert membership.created_at is not None
