"""
Authentication namespace for registering and logging in business owners.
"""
from flask_restx import Namespace

auth_ns = Namespace(
    'auth',
    description='Authentication operations'
)

from . import routes  # noqa: E402,F401
