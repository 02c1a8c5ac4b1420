"""
Member management.
"""
import logging
from datetime import date

from memberdesk.errors import NotFoundError, ValidationError
from memberdesk.models import Member, NotificationType
from memberdesk.repositories import MemberRepository

from .base import BaseService, require_business

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 100
EDITABLE_FIELDS = ('first_name', 'last_name', 'email', 'phone', 'address',
                   'date_of_birth', 'notes')


def validate_member_data(data, partial=False):
    """
    Validate member fields.

    Args:
        data (dict): Incoming fields
        partial (bool): When True, only validate the fields present

    Raises:
        ValidationError: On the first failing rule
    """
    for name, label in (('first_name', 'First name'), ('last_name', 'Last name')):
        if partial and name not in data:
            continue
        value = (data.get(name) or '').strip()
        if not value:
            raise ValidationError(f"{label} is required")
        if len(value) > NAME_MAX_LENGTH:
            raise ValidationError(f"{label} must not exceed {NAME_MAX_LENGTH} characters")

    email = data.get('email')
    if email and '@' not in email:
        raise ValidationError("Invalid email format")

    dob = data.get('date_of_birth')
    if dob is not None and not isinstance(dob, date):
        try:
            data['date_of_birth'] = date.fromisoformat(str(dob))
        except ValueError:
            raise ValidationError("Invalid date of birth, expected YYYY-MM-DD") from None


class MemberService(BaseService):

    def __init__(self, session=None, clock=None, notifier=None):
        super().__init__(session=session, clock=clock, notifier=notifier)
        self.members = MemberRepository(self.session)

    def create_member(self, business_id, **data):
        require_business(business_id)
        validate_member_data(data)

        now = self.clock()
        with self.unit_of_work():
            member = Member(
                business_id=business_id,
                is_active=True,
                created_at=now,
                updated_at=now,
                **{key: data.get(key) for key in EDITABLE_FIELDS},
            )
            member.first_name = member.first_name.strip()
            member.last_name = member.last_name.strip()
            self.members.add(member)

        logger.info("Created member %s for business %s", member.id, business_id)
        self.notifier.notify(
            business_id,
            NotificationType.MEMBER_ADDED,
            title="Member added",
            message=f"{member.full_name} was added",
            related_entity_type="member",
            related_entity_id=member.id,
        )
        return member

    def get_member(self, business_id, member_id):
        require_business(business_id)
        member = self.members.get(member_id, business_id)
        if member is None:
            raise NotFoundError("Member not found")
        return member

    def update_member(self, business_id, member_id, **data):
        require_business(business_id)
        validate_member_data(data, partial=True)

        with self.unit_of_work():
            member = self.get_member(business_id, member_id)
            for key in EDITABLE_FIELDS:
                if key in data:
                    setattr(member, key, data[key])
            if 'is_active' in data:
                member.is_active = bool(data['is_active'])
            self.members.update(member, self.clock())
        return member

    def deactivate_member(self, business_id, member_id):
        """Soft-deactivate a member. Existing memberships are untouched."""
        require_business(business_id)
        with self.unit_of_work():
            member = self.get_member(business_id, member_id)
            member.deactivate(self.clock())
        logger.info("Deactivated member %s", member_id)
        return member

    def search_members(self, business_id, page=1, per_page=10, search=None):
        require_business(business_id)
        if page < 1 or per_page < 1:
            raise ValidationError("Page and page size must be positive")
        return self.members.search(business_id, page=page, per_page=per_page, search=search)
