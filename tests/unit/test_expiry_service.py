"""
Unit tests for the expiry sweep and renewal reminders.
"""
from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import OperationalError

from memberdesk.models import Membership, MembershipStatus, Notification, NotificationType
from memberdesk.services import ExpiryService, MembershipService


@pytest.fixture
def service(clock):
    return ExpiryService(clock=clock)


@pytest.fixture
def plan(business_id, make_plan):
    return make_plan(business_id, duration_days=30)


def _status(db, membership_id):
    db.session.expire_all()
    return db.session.get(Membership, membership_id).status


class TestExpireMemberships:

    def test_expires_membership_that_ended_yesterday(self, service, db, clock, business_id,
                                                     plan, make_member, make_membership):
        member = make_member(business_id)
        # Expired 2023-12-31, one day before the frozen now
        membership = make_membership(business_id, member.id, plan.id,
                                     start_date=clock.now - timedelta(days=31))

        result = service.expire_memberships()

        assert result.scanned == 1
        assert result.expired == 1
        assert result.failed == 0
        assert result.expired_ids == [membership.id]
        assert _status(db, membership.id) == MembershipStatus.EXPIRED.value

        queries = MembershipService(clock=clock)
        assert membership.id in {m.id for m in queries.get_expired(business_id)}
        assert membership.id not in {m.id for m in queries.get_active(business_id)}

    def test_leaves_current_and_non_active_rows_alone(self, service, db, clock, business_id,
                                                      plan, make_member, make_membership):
        current = make_membership(business_id, make_member(business_id).id, plan.id)
        cancelled = make_membership(business_id, make_member(business_id).id, plan.id,
                                    start_date=clock.now - timedelta(days=60))
        cancelled.status = MembershipStatus.CANCELLED.value
        db.session.commit()

        result = service.expire_memberships()

        assert result.scanned == 0
        assert result.expired == 0
        assert _status(db, current.id) == MembershipStatus.ACTIVE.value
        assert _status(db, cancelled.id) == MembershipStatus.CANCELLED.value

    def test_expiry_instant_equal_to_now_is_lapsed(self, service, db, clock, business_id,
                                                   plan, make_member, make_membership):
        membership = make_membership(business_id, make_member(business_id).id, plan.id,
                                     start_date=clock.now - timedelta(days=30))
        assert membership.expiry_date == clock.now

        assert service.expire_memberships().expired == 1

    def test_second_run_is_a_no_op(self, service, db, clock, business_id, plan,
                                   make_member, make_membership):
        make_membership(business_id, make_member(business_id).id, plan.id,
                        start_date=clock.now - timedelta(days=45))

        first = service.expire_memberships()
        second = service.expire_memberships()

        assert first.expired == 1
        assert second.scanned == 0
        assert second.expired == 0
        assert Notification.query.filter_by(
            type=NotificationType.MEMBERSHIP_EXPIRED.value
        ).count() == 1

    def test_sweeps_every_business(self, service, db, clock, owner, other_owner,
                                   make_plan, make_member, make_membership):
        ids = []
        for business_id in (owner['business_id'], other_owner['business_id']):
            plan = make_plan(business_id)
            member = make_member(business_id)
            ids.append(make_membership(business_id, member.id, plan.id,
                                       start_date=clock.now - timedelta(days=40)).id)

        result = service.expire_memberships()

        assert sorted(result.expired_ids) == sorted(ids)
        notified = {n.business_id for n in Notification.query.filter_by(
            type=NotificationType.MEMBERSHIP_EXPIRED.value)}
        assert notified == {owner['business_id'], other_owner['business_id']}
        assert service.expired_ids_for_business(result, other_owner['business_id']) == [ids[1]]

    def test_failed_row_is_skipped(self, service, db, clock, business_id, plan,
                                   make_member, make_membership, monkeypatch):
        broken = make_membership(business_id, make_member(business_id).id, plan.id,
                                 start_date=clock.now - timedelta(days=40))
        healthy = make_membership(business_id, make_member(business_id).id, plan.id,
                                  start_date=clock.now - timedelta(days=35))

        original = service.memberships.mark_expired

        def flaky_mark_expired(membership_id, now):
            if membership_id == broken.id:
                raise OperationalError("UPDATE memberships", {}, Exception("lock timeout"))
            return original(membership_id, now)

        monkeypatch.setattr(service.memberships, 'mark_expired', flaky_mark_expired)

        result = service.expire_memberships()

        assert result.scanned == 2
        assert result.expired == 1
        assert result.failed == 1
        assert _status(db, healthy.id) == MembershipStatus.EXPIRED.value
        assert _status(db, broken.id) == MembershipStatus.ACTIVE.value

        # The next run picks the skipped row up
        monkeypatch.undo()
        assert ExpiryService(clock=clock).expire_memberships().expired_ids == [broken.id]

    def test_failure_after_update_rolls_back_only_that_row(self, service, db, clock, business_id,
                                                          plan, make_member, make_membership,
                                                          monkeypatch):
        broken = make_membership(business_id, make_member(business_id).id, plan.id,
                                 start_date=clock.now - timedelta(days=40))
        healthy = make_membership(business_id, make_member(business_id).id, plan.id,
                                  start_date=clock.now - timedelta(days=35))

        original = service.memberships.mark_expired

        def mark_expired_then_fail(membership_id, now):
            changed = original(membership_id, now)
            if membership_id == broken.id:
                assert changed == 1
                raise OperationalError("UPDATE memberships", {}, Exception("deadlock"))
            return changed

        monkeypatch.setattr(service.memberships, 'mark_expired', mark_expired_then_fail)

        result = service.expire_memberships()

        assert result.failed == 1
        assert result.expired_ids == [healthy.id]
        # The UPDATE already issued for the broken row was undone with its savepoint
        assert _status(db, broken.id) == MembershipStatus.ACTIVE.value
        assert _status(db, healthy.id) == MembershipStatus.EXPIRED.value
        notified = [n.related_entity_id for n in Notification.query.filter_by(
            type=NotificationType.MEMBERSHIP_EXPIRED.value)]
        assert notified == [healthy.id]

    def test_to_dict(self, service):
        assert service.expire_memberships().to_dict() == {
            'scanned': 0, 'expired': 0, 'failed': 0, 'expired_ids': [],
        }


class TestRenewalReminders:

    def test_notifies_memberships_inside_window(self, service, db, clock, business_id, plan,
                                                make_member, make_membership):
        # expires in 2 days: reminded
        due = make_membership(business_id, make_member(business_id).id, plan.id,
                              start_date=clock.now - timedelta(days=28))
        # expires in 10 days: not yet
        make_membership(business_id, make_member(business_id).id, plan.id,
                        start_date=clock.now - timedelta(days=20))
        # already lapsed: left to the expiry sweep
        make_membership(business_id, make_member(business_id).id, plan.id,
                        start_date=clock.now - timedelta(days=40))

        sent = service.send_renewal_reminders(days=3)

        assert sent == 1
        reminder = Notification.query.filter_by(
            type=NotificationType.MEMBERSHIP_RENEWAL_REMINDER.value
        ).one()
        assert reminder.related_entity_id == due.id

    def test_window_defaults_to_config(self, service, app, clock, business_id, plan,
                                       make_member, make_membership):
        make_membership(business_id, make_member(business_id).id, plan.id,
                        start_date=clock.now - timedelta(days=26))
        assert app.config['RENEWAL_REMINDER_DAYS'] == 3

        # expires in 4 days, outside the default window
        assert service.send_renewal_reminders() == 0
        assert service.send_renewal_reminders(days=5) == 1

    def test_undelivered_reminders_are_not_counted(self, clock, business_id, plan,
                                                   make_member, make_membership):
        make_membership(business_id, make_member(business_id).id, plan.id,
                        start_date=clock.now - timedelta(days=29))

        class SilentNotifier:
            def notify(self, *args, **kwargs):
                return None

        service = ExpiryService(clock=clock, notifier=SilentNotifier())
        assert service.send_renewal_reminders(days=3) == 0
