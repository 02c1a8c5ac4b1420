"""
Memberships and renewals namespaces.
"""
from flask_restx import Namespace

membership_ns = Namespace(
    'memberships',
    description='Membership lifecycle operations'
)

renewal_ns = Namespace(
    'renewals',
    description='Upcoming renewals'
)

from . import routes  # noqa: E402,F401
