"""
Expiry sweep: flips lapsed active memberships to expired.
"""
import logging
from dataclasses import dataclass, field

from flask import current_app, has_app_context
from sqlalchemy.exc import SQLAlchemyError

from memberdesk.models import NotificationType
from memberdesk.repositories import MembershipRepository

from .base import BaseService

logger = logging.getLogger(__name__)

DEFAULT_REMINDER_DAYS = 3


@dataclass
class ExpiryResult:
    """Outcome of one sweep."""
    scanned: int = 0
    expired: int = 0
    failed: int = 0
    expired_ids: list = field(default_factory=list)

    def to_dict(self):
        return {
            'scanned': self.scanned,
            'expired': self.expired,
            'failed': self.failed,
            'expired_ids': list(self.expired_ids),
        }


class ExpiryService(BaseService):
    """
    System-wide sweep over all businesses.

    Each transition is an UPDATE guarded by ``status = 'active'``, so the
    sweep is idempotent and never overwrites a concurrent status change.
    Re-running after a failure is always safe.
    """

    def __init__(self, session=None, clock=None, notifier=None):
        super().__init__(session=session, clock=clock, notifier=notifier)
        self.memberships = MembershipRepository(self.session)

    def expire_memberships(self):
        """
        Expire every active membership whose expiry date has passed.

        Each row is updated inside its own savepoint, so a row that fails
        is rolled back alone, logged and skipped. The batch is committed
        once; a commit failure is rolled back and re-raised so the next run
        picks the rows up again.

        Returns:
            ExpiryResult
        """
        now = self.clock()
        lapsed = self.memberships.lapsed_ids(now)
        result = ExpiryResult(scanned=len(lapsed))

        if not lapsed:
            logger.info("No expired memberships found to process")
            return result

        for membership_id in lapsed:
            try:
                with self.session.begin_nested():
                    changed = self.memberships.mark_expired(membership_id, now)
            except SQLAlchemyError:
                logger.exception("Failed to expire membership %s", membership_id)
                result.failed += 1
                continue
            if changed:
                result.expired_ids.append(membership_id)
        result.expired = len(result.expired_ids)

        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Error committing membership expiry batch")
            raise

        logger.info("Marked %d memberships as expired (%d failed)", result.expired, result.failed)
        self._notify_expired(result.expired_ids)
        return result

    def expired_ids_for_business(self, result, business_id):
        """Expired ids from ``result`` that belong to ``business_id``."""
        return self.memberships.ids_in_business(result.expired_ids, business_id)

    def _notify_expired(self, membership_ids):
        for membership_id in membership_ids:
            membership = self.memberships.get(membership_id)
            if membership is None:
                continue
            self.notifier.notify(
                membership.business_id,
                NotificationType.MEMBERSHIP_EXPIRED,
                title="Membership expired",
                message=f"Membership #{membership.id} expired on {membership.expiry_date:%Y-%m-%d}",
                related_entity_type="membership",
                related_entity_id=membership.id,
            )

    def send_renewal_reminders(self, days=None):
        """
        Notify owners about active memberships expiring within ``days``.

        Returns:
            int: Number of reminders sent.
        """
        if days is None:
            days = DEFAULT_REMINDER_DAYS
            if has_app_context():
                days = current_app.config.get('RENEWAL_REMINDER_DAYS', DEFAULT_REMINDER_DAYS)

        now = self.clock()
        expiring = self.memberships.expiring_within(None, now, days, include_overdue=False)
        sent = 0
        for membership in expiring:
            notification = self.notifier.notify(
                membership.business_id,
                NotificationType.MEMBERSHIP_RENEWAL_REMINDER,
                title="Membership renewal due",
                message=f"Membership #{membership.id} expires on {membership.expiry_date:%Y-%m-%d}",
                related_entity_type="membership",
                related_entity_id=membership.id,
            )
            if notification is not None:
                sent += 1
        logger.info("Sent %d renewal reminders (window %d days)", sent, days)
        return sent
