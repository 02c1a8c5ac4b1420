"""
Background tasks run by Celery workers and beat.
"""
