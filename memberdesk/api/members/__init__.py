"""
Members namespace.
"""
from flask_restx import Namespace

member_ns = Namespace(
    'members',
    description='Member management operations'
)

from . import routes  # noqa: E402,F401
