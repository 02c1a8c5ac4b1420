"""
Dashboard namespace.
"""
from flask_restx import Namespace

dashboard_ns = Namespace(
    'dashboard',
    description='Business dashboard'
)

from . import routes  # noqa: E402,F401
