"""
Subscription plan management.
"""
import logging

from memberdesk.errors import NotFoundError, ValidationError
from memberdesk.models import SubscriptionPlan
from memberdesk.repositories import PlanRepository
from memberdesk.utils.money import to_money

from .base import BaseService, require_business

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 200


def _clean_plan_data(data, partial=False):
    cleaned = dict(data)

    if not partial or 'name' in data:
        name = (data.get('name') or '').strip()
        if not name:
            raise ValidationError("Plan name is required")
        if len(name) > NAME_MAX_LENGTH:
            raise ValidationError(f"Plan name must not exceed {NAME_MAX_LENGTH} characters")
        cleaned['name'] = name

    if not partial or 'price' in data:
        if data.get('price') is None:
            raise ValidationError("Price is required")
        try:
            price = to_money(data['price'])
        except ValueError:
            raise ValidationError("Price must be a number") from None
        if price < 0:
            raise ValidationError("Price must be greater than or equal to 0")
        cleaned['price'] = price

    if not partial or 'duration_days' in data:
        duration = data.get('duration_days')
        if isinstance(duration, bool) or not isinstance(duration, int):
            raise ValidationError("Duration must be a whole number of days")
        if duration <= 0:
            raise ValidationError("Duration must be greater than 0")

    return cleaned


class PlanService(BaseService):
    """
    CRUD for plans. Edits never propagate to existing memberships, which
    snapshot price and expiry at creation.
    """

    def __init__(self, session=None, clock=None):
        super().__init__(session=session, clock=clock)
        self.plans = PlanRepository(self.session)

    def create_plan(self, business_id, name, price, duration_days, description=None, is_active=True):
        require_business(business_id)
        data = _clean_plan_data({'name': name, 'price': price, 'duration_days': duration_days})

        now = self.clock()
        with self.unit_of_work():
            plan = SubscriptionPlan(
                business_id=business_id,
                name=data['name'],
                description=description,
                price=data['price'],
                duration_days=duration_days,
                is_active=is_active,
                created_at=now,
                updated_at=now,
            )
            self.plans.add(plan)

        logger.info("Created plan %s (%s) for business %s", plan.id, plan.name, business_id)
        return plan

    def get_plan(self, business_id, plan_id):
        require_business(business_id)
        plan = self.plans.get(plan_id, business_id)
        if plan is None:
            raise NotFoundError("Subscription plan not found")
        return plan

    def list_plans(self, business_id, active_only=False):
        require_business(business_id)
        return self.plans.list(business_id, active_only=active_only)

    def update_plan(self, business_id, plan_id, **data):
        require_business(business_id)
        data = _clean_plan_data(data, partial=True)

        with self.unit_of_work():
            plan = self.get_plan(business_id, plan_id)
            for key in ('name', 'description', 'price', 'duration_days', 'is_active'):
                if key in data:
                    setattr(plan, key, data[key])
            self.plans.update(plan, self.clock())
        return plan
