"""
Subscription plan repository.
"""
from memberdesk.models import SubscriptionPlan

from .base import Repository


class PlanRepository(Repository):
    model = SubscriptionPlan

    def list(self, business_id, active_only=False):
        query = self._query(business_id)
        if active_only:
            query = query.filter(SubscriptionPlan.is_active.is_(True))
        return query.order_by(SubscriptionPlan.price, SubscriptionPlan.id).all()
