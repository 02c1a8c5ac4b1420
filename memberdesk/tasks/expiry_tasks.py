"""
Membership expiry and renewal reminder tasks.
"""
import logging

from memberdesk.services.expiry_service import ExpiryService
from memberdesk.tasks.celery_app import celery

logger = logging.getLogger(__name__)


@celery.task(name="memberdesk.tasks.expire_memberships", bind=True,
             autoretry_for=(Exception,), retry_backoff=60, max_retries=3)
def expire_memberships(self):
    """Run the expiry sweep. Safe to retry: each transition is idempotent."""
    result = ExpiryService().expire_memberships()
    return result.to_dict()


@celery.task(name="memberdesk.tasks.send_renewal_reminders")
def send_renewal_reminders(days=None):
    return ExpiryService().send_renewal_reminders(days=days)
