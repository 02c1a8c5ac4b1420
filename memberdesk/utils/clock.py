"""
Clock helpers. All timestamps are naive UTC.
"""
from datetime import UTC, datetime


def utcnow():
    """Return the current UTC time as a naive datetime."""
    return datetime.now(UTC).replace(tzinfo=None)


def to_naive_utc(value):
    """
    Normalize a datetime to naive UTC.

    Aware values are converted to UTC first; naive values are assumed to
    already be UTC.
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def start_of_month(value):
    """Return the first instant of the calendar month containing value."""
    return value.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
