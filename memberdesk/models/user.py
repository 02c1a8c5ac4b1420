"""
User model for authentication.
"""
from werkzeug.security import check_password_hash, generate_password_hash

from memberdesk import db

from .base import BaseModel


class User(BaseModel):
    """
    Business owner account.

    Attributes:
        email (str): Login email (unique)
        password_hash (str): Hashed password
        first_name (str): Given name
        last_name (str): Family name
        role (str): Account role, always "owner"
    """
    __tablename__ = 'users'

    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    role = db.Column(db.String(20), nullable=False, default="owner")

    def __init__(self, email, password, first_name, last_name, role="owner"):
        """
        Initialize a new User instance.

        Args:
            email (str): User's email
            password (str): User's password (will be hashed)
            first_name (str): Given name
            last_name (str): Family name
            role (str, optional): Account role
        """
        self.email = email
        self.password_hash = generate_password_hash(password)
        self.first_name = first_name
        self.last_name = last_name
        self.role = role

    def check_password(self, password):
        """
        Verify a password against the stored hash.

        Args:
            password (str): Password to check

        Returns:
            bool: True if password matches, False otherwise
        """
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f"<User {self.email}>"
