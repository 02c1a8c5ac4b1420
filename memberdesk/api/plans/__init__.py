"""
Subscription plans namespace.
"""
from flask_restx import Namespace

plan_ns = Namespace(
    'plans',
    description='Subscription plans operations'
)

from . import routes  # noqa: E402,F401
