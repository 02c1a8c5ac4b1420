"""
Jobs namespace: on-demand runs of the scheduled jobs.
"""
from flask_restx import Namespace

jobs_ns = Namespace(
    'jobs',
    description='Trigger scheduled jobs on demand'
)

from . import routes  # noqa: E402,F401
