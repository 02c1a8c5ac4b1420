"""
Owner registration and login.
"""
import logging

from flask_jwt_extended import create_access_token, create_refresh_token

from memberdesk.errors import ConflictError, UnauthorizedError, ValidationError
from memberdesk.models import Business, User
from memberdesk.repositories import BusinessRepository, UserRepository

from .base import BaseService

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def issue_tokens(user, business):
    """
    Create access and refresh tokens. The business id travels as a claim so
    every request can be scoped without a lookup.
    """
    claims = {'business_id': business.id}
    return {
        'access_token': create_access_token(identity=str(user.id), additional_claims=claims),
        'refresh_token': create_refresh_token(identity=str(user.id), additional_claims=claims),
        'user_id': user.id,
        'email': user.email,
        'business_id': business.id,
        'business_name': business.name,
    }


class AuthService(BaseService):

    def __init__(self, session=None, clock=None):
        super().__init__(session=session, clock=clock)
        self.users = UserRepository(self.session)
        self.businesses = BusinessRepository(self.session)

    def register(self, email, password, first_name, last_name, business_name, currency="USD"):
        """
        Create an owner account together with its business.

        Returns:
            dict: Tokens plus user and business identifiers
        """
        if not all([email, password, first_name, last_name, business_name]):
            raise ValidationError("Missing required fields")
        if '@' not in email:
            raise ValidationError("Invalid email format")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        if self.users.email_exists(email):
            raise ConflictError("Email already registered")

        now = self.clock()
        with self.unit_of_work():
            user = User(email=email, password=password,
                        first_name=first_name, last_name=last_name)
            user.created_at = user.updated_at = now
            self.users.add(user)

            business = Business(
                user_id=user.id,
                name=business_name,
                currency=(currency or "USD").upper(),
                created_at=now,
                updated_at=now,
            )
            self.businesses.add(business)

        logger.info("Registered business %s for user %s", business.id, user.id)
        return issue_tokens(user, business)

    def login(self, email, password):
        if not email or not password:
            raise ValidationError("Missing required fields")

        user = self.users.get_by_email(email)
        if user is None or not user.check_password(password):
            raise UnauthorizedError("Invalid email or password")

        business = self.businesses.get_by_user(user.id)
        if business is None:
            raise UnauthorizedError("Business context not found")
        return issue_tokens(user, business)

    def refresh(self, user_id, business_id):
        """Issue a new access token for an existing refresh token identity."""
        claims = {'business_id': business_id}
        return {'access_token': create_access_token(identity=str(user_id), additional_claims=claims)}
