"""
Payments namespace.
"""
from flask_restx import Namespace

payment_ns = Namespace(
    'payments',
    description='Payment operations'
)

from . import routes  # noqa: E402,F401
