"""
Unit tests for DashboardService.
"""
from datetime import datetime
from decimal import Decimal

import pytest

from memberdesk.errors import UnauthorizedError
from memberdesk.models import MembershipStatus
from memberdesk.services import DashboardService, DashboardStats, PaymentService


@pytest.fixture
def populated(db, clock, owner, other_owner, make_member, make_plan, make_membership):
    """
    Business with, at 2024-01-15 12:00:
        alice    active until 2024-02-09, paid 40 of 100 this month
        bob      active until 2024-01-19, paid in full last month
        carol    expires exactly now, paid 25 this month
        dave     flagged expired
        erin     no membership
    """
    clock.now = datetime(2024, 1, 15, 12, 0)
    business_id = owner['business_id']
    plan = make_plan(business_id, price="100.00", duration_days=30)
    payments = PaymentService(clock=clock)

    names = ("Alice", "Bob", "Carol", "Dave", "Erin")
    members = {name: make_member(business_id, first_name=name, last_name="Test") for name in names}

    alice = make_membership(business_id, members["Alice"].id, plan.id,
                            start_date=datetime(2024, 1, 10))
    payments.record_payment(business_id, alice.id, "40", "cash",
                            payment_date=datetime(2024, 1, 10))

    bob = make_membership(business_id, members["Bob"].id, plan.id,
                          start_date=datetime(2023, 12, 20))
    payments.record_payment(business_id, bob.id, "100", "card",
                            payment_date=datetime(2023, 12, 20))

    carol = make_membership(business_id, members["Carol"].id, plan.id,
                            start_date=datetime(2023, 12, 16, 12, 0))
    payments.record_payment(business_id, carol.id, "25", "cash",
                            payment_date=datetime(2024, 1, 2))

    dave = make_membership(business_id, members["Dave"].id, plan.id,
                           start_date=datetime(2023, 11, 1))
    dave.status = MembershipStatus.EXPIRED.value
    db.session.commit()

    # Noise in another business
    rival_id = other_owner['business_id']
    rival_plan = make_plan(rival_id, price="500.00")
    rival_member = make_member(rival_id)
    rival = make_membership(rival_id, rival_member.id, rival_plan.id,
                            start_date=datetime(2024, 1, 14))
    payments.record_payment(rival_id, rival.id, "500", "cash", payment_date=datetime(2024, 1, 14))

    return business_id


def test_get_stats(clock, populated):
    stats = DashboardService(clock=clock).get_stats(populated)

    assert isinstance(stats, DashboardStats)
    assert stats.total_members == 5
    assert stats.active_members == 2
    assert stats.expired_members == 2
    assert stats.renewals_due_today == 1
    assert stats.renewals_due_this_week == 2
    assert stats.monthly_collection == Decimal("65.00")
    assert stats.total_outstanding == Decimal("60.00")


def test_member_with_several_memberships_counts_once(clock, business_id, make_member,
                                                     make_plan, make_membership):
    member = make_member(business_id)
    plan = make_plan(business_id, duration_days=30)
    make_membership(business_id, member.id, plan.id, start_date=datetime(2024, 1, 1))
    make_membership(business_id, member.id, plan.id, start_date=datetime(2024, 2, 1))

    stats = DashboardService(clock=clock).get_stats(business_id)
    assert stats.active_members == 1


def test_empty_business(clock, business_id):
    stats = DashboardService(clock=clock).get_stats(business_id)
    assert stats.to_dict() == {
        'total_members': 0,
        'active_members': 0,
        'expired_members': 0,
        'renewals_due_today': 0,
        'renewals_due_this_week': 0,
        'monthly_collection': Decimal("0.00"),
        'total_outstanding': Decimal("0.00"),
    }


def test_requires_business(clock):
    with pytest.raises(UnauthorizedError):
        DashboardService(clock=clock).get_stats(None)
