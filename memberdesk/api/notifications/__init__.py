"""
Notifications namespace.
"""
from flask_restx import Namespace

notification_ns = Namespace(
    'notifications',
    description='Notifications for the signed-in user'
)

from . import routes  # noqa: E402,F401
