"""
Business profile namespace.
"""
from flask_restx import Namespace

business_ns = Namespace(
    'business',
    description='Business profile operations'
)

from . import routes  # noqa: E402,F401
