#!/usr/bin/env python
"""
Celery entry point.

    celery -A celery_worker.celery worker --loglevel=info
    celery -A celery_worker.celery beat --loglevel=info
"""
from memberdesk import create_app
from memberdesk.tasks.celery_app import celery  # noqa: F401

app = create_app()
