"""
Membership repository: overlap detection and time-window queries.
"""
from datetime import timedelta

from sqlalchemy import or_

from memberdesk.models import Membership, MembershipStatus

from .base import Repository

ACTIVE = MembershipStatus.ACTIVE.value
EXPIRED = MembershipStatus.EXPIRED.value


class MembershipRepository(Repository):
    model = Membership

    def has_overlapping(self, member_id, start_date, expiry_date):
        """
        True if the member has a non-deleted active membership whose range
        intersects [start_date, expiry_date], boundaries included.
        """
        query = self._query().filter(
            Membership.member_id == member_id,
            Membership.status == ACTIVE,
            Membership.overlap_clause(start_date, expiry_date),
        )
        return self.session.query(query.exists()).scalar()

    def list_for_business(self, business_id, member_id=None):
        query = self._query(business_id)
        if member_id is not None:
            query = query.filter(Membership.member_id == member_id)
        return query.order_by(Membership.created_at.desc(), Membership.id.desc()).all()

    def active(self, business_id, now):
        return self._query(business_id).filter(
            Membership.status == ACTIVE,
            Membership.expiry_date > now,
        ).all()

    def expired(self, business_id, now):
        # Time-lapsed rows count as expired before the sweep flips them
        return self._query(business_id).filter(
            or_(Membership.status == EXPIRED, Membership.expiry_date <= now)
        ).all()

    def expiring_within(self, business_id, now, days, include_overdue=True):
        """
        Active memberships expiring on or before now + days, soonest first.

        With include_overdue=False the window starts at now, so lapsed rows
        the sweep has not flipped yet are left out.
        """
        query = self._query(business_id).filter(
            Membership.status == ACTIVE,
            Membership.expiry_date <= now + timedelta(days=days),
        )
        if not include_overdue:
            query = query.filter(Membership.expiry_date >= now)
        return query.order_by(Membership.expiry_date, Membership.id).all()

    def lapsed_ids(self, now):
        """Ids of active memberships past their expiry, across all businesses."""
        rows = self._query().with_entities(Membership.id).filter(
            Membership.status == ACTIVE,
            Membership.expiry_date <= now,
        ).order_by(Membership.id).all()
        return [row.id for row in rows]

    def mark_expired(self, membership_id, now):
        """
        Flip one membership to expired if it is still active.

        Returns the number of rows changed (0 or 1).
        """
        return self.session.query(Membership).filter(
            Membership.id == membership_id,
            Membership.status == ACTIVE,
            Membership.is_deleted.is_(False),
        ).update(
            {Membership.status: EXPIRED, Membership.updated_at: now},
            synchronize_session=False,
        )

    def ids_in_business(self, membership_ids, business_id):
        """The subset of ``membership_ids`` owned by ``business_id``, ascending."""
        if not membership_ids:
            return []
        rows = self.session.query(Membership.id).filter(
            Membership.id.in_(membership_ids),
            Membership.business_id == business_id,
        ).order_by(Membership.id).all()
        return [row.id for row in rows]
