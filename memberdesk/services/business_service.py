"""
Business profile.
"""
from memberdesk.errors import NotFoundError, ValidationError
from memberdesk.repositories import BusinessRepository

from .base import BaseService, require_business

EDITABLE_FIELDS = ('name', 'description', 'address', 'phone', 'email', 'currency', 'tax_id')


class BusinessService(BaseService):

    def __init__(self, session=None, clock=None):
        super().__init__(session=session, clock=clock)
        self.businesses = BusinessRepository(self.session)

    def get_business(self, business_id):
        require_business(business_id)
        business = self.businesses.get(business_id)
        if business is None:
            raise NotFoundError("Business not found")
        return business

    def update_business(self, business_id, **data):
        if 'name' in data and not (data['name'] or '').strip():
            raise ValidationError("Business name is required")
        if data.get('email') and '@' not in data['email']:
            raise ValidationError("Invalid email format")
        if data.get('currency') and len(data['currency']) != 3:
            raise ValidationError("Currency must be a 3-letter code")

        with self.unit_of_work():
            business = self.get_business(business_id)
            for key in EDITABLE_FIELDS:
                if key in data:
                    setattr(business, key, data[key])
            if business.currency:
                business.currency = business.currency.upper()
            self.businesses.update(business, self.clock())
        return business
