"""
Membership lifecycle: creation with overlap prevention and expiry queries.
"""
import logging

from memberdesk.errors import ConflictError, NotFoundError, ValidationError
from memberdesk.models import Membership, MembershipStatus, NotificationType
from memberdesk.repositories import (MemberRepository, MembershipRepository,
                                     PlanRepository)
from memberdesk.utils.clock import to_naive_utc
from memberdesk.utils.money import to_money

from .base import BaseService, require_business

logger = logging.getLogger(__name__)


class MembershipService(BaseService):
    """Creates memberships and answers the active/expired/expiring queries."""

    def __init__(self, session=None, clock=None, notifier=None):
        super().__init__(session=session, clock=clock, notifier=notifier)
        self.members = MemberRepository(self.session)
        self.plans = PlanRepository(self.session)
        self.memberships = MembershipRepository(self.session)

    def create_membership(self, business_id, member_id, plan_id, start_date=None, notes=None):
        """
        Assign a plan to a member.

        The member row is locked for the duration of the transaction so two
        concurrent requests for the same member cannot both pass the overlap
        check.

        Args:
            business_id (int): Caller's business
            member_id (int): Member to enrol
            plan_id (int): Plan to assign
            start_date (datetime, optional): Defaults to now (UTC)
            notes (str, optional): Free-form notes

        Returns:
            Membership: The persisted membership

        Raises:
            NotFoundError: Member or plan missing or owned by another business
            ConflictError: The member already has an overlapping active membership
        """
        require_business(business_id)

        with self.unit_of_work():
            member = self.members.get(member_id, business_id, for_update=True)
            if member is None:
                raise NotFoundError("Member not found")

            plan = self.plans.get(plan_id, business_id)
            if plan is None:
                raise NotFoundError("Subscription plan not found")

            now = self.clock()
            start = to_naive_utc(start_date) if start_date is not None else now
            expiry = Membership.compute_expiry(start, plan.duration_days)

            if self.memberships.has_overlapping(member.id, start, expiry):
                logger.info(
                    "Rejected overlapping membership for member %s (%s - %s)",
                    member.id, start.isoformat(), expiry.isoformat()
                )
                raise ConflictError("Member already has an active membership in this period")

            membership = Membership(
                business_id=business_id,
                member_id=member.id,
                plan_id=plan.id,
                start_date=start,
                expiry_date=expiry,
                status=MembershipStatus.ACTIVE.value,
                total_amount=to_money(plan.price),
                paid_amount=to_money(0),
                notes=notes,
                created_at=now,
                updated_at=now,
            )
            self.memberships.add(membership)
            member_name = member.full_name
            plan_name = plan.name

        logger.info(
            "Created membership %s for member %s on plan %s",
            membership.id, membership.member_id, membership.plan_id
        )
        self.notifier.notify(
            business_id,
            NotificationType.MEMBERSHIP_CREATED,
            title="Membership created",
            message=f"{member_name} joined {plan_name} until {expiry:%Y-%m-%d}",
            related_entity_type="membership",
            related_entity_id=membership.id,
        )
        return membership

    def get_membership(self, business_id, membership_id):
        require_business(business_id)
        membership = self.memberships.get(membership_id, business_id)
        if membership is None:
            raise NotFoundError("Membership not found")
        return membership

    def list_memberships(self, business_id, member_id=None):
        """List memberships newest first, optionally for one member."""
        require_business(business_id)
        return self.memberships.list_for_business(business_id, member_id=member_id)

    def get_active(self, business_id):
        """Active memberships whose expiry is still in the future."""
        require_business(business_id)
        return self.memberships.active(business_id, self.clock())

    def get_expired(self, business_id):
        """
        Memberships flagged expired or already past their expiry date.

        Status and date are independent signals here; the expiry sweep is
        what reconciles them.
        """
        require_business(business_id)
        return self.memberships.expired(business_id, self.clock())

    def get_expiring_within_days(self, business_id, days, include_overdue=True):
        """
        Active memberships expiring within ``days`` days, soonest first.

        Lapsed memberships still flagged active are included unless
        include_overdue is False. The dashboard's renewals-due-today and
        renewals-due-this-week counts rely on this overdue-inclusive default.
        """
        require_business(business_id)
        if days is None or days < 0:
            raise ValidationError("Days must be zero or greater")
        return self.memberships.expiring_within(
            business_id, self.clock(), days, include_overdue=include_overdue
        )
