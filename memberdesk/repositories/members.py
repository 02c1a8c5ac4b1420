"""
Member repository.
"""
from sqlalchemy import or_

from memberdesk.models import Member

from .base import Repository


class MemberRepository(Repository):
    model = Member

    def count(self, business_id):
        return self._query(business_id).count()

    def search(self, business_id, page=1, per_page=10, search=None):
        """
        Paged, case-insensitive search over name, email and phone,
        ordered by last name then first name.
        """
        query = self._query(business_id)
        if search and search.strip():
            pattern = f"%{search.strip()}%"
            query = query.filter(or_(
                Member.first_name.ilike(pattern),
                Member.last_name.ilike(pattern),
                Member.email.ilike(pattern),
                Member.phone.ilike(pattern),
            ))
        query = query.order_by(Member.last_name, Member.first_name, Member.id)
        return query.paginate(page=page, per_page=per_page, error_out=False)
