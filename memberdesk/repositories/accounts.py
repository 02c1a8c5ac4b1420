"""
Repositories for owner accounts and their businesses.
"""
from sqlalchemy import func

from memberdesk.models import Business, User

from .base import Repository


class UserRepository(Repository):
    model = User

    def get_by_email(self, email):
        return self._query().filter(func.lower(User.email) == email.lower()).first()

    def email_exists(self, email):
        return self.get_by_email(email) is not None


class BusinessRepository(Repository):
    model = Business

    def _query(self, business_id=None):
        # Business rows are the tenants themselves
        query = self.session.query(Business).filter(Business.is_deleted.is_(False))
        if business_id is not None:
            query = query.filter(Business.id == business_id)
        return query

    def get_by_user(self, user_id):
        return self._query().filter(Business.user_id == user_id).first()
