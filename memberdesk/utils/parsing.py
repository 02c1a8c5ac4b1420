"""
Helpers for reading request payloads and query strings.
"""
from datetime import datetime

from memberdesk.errors import ValidationError
from memberdesk.utils.clock import to_naive_utc


def parse_datetime(value, field_name="date"):
    """
    Parse an ISO 8601 date or datetime string into a naive UTC datetime.

    A trailing "Z" is accepted. Returns None for empty values.
    """
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return to_naive_utc(value)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return to_naive_utc(datetime.fromisoformat(text))
    except ValueError:
        raise ValidationError(f"Invalid {field_name}, expected ISO 8601") from None


def parse_bool(value, default=False):
    if value is None:
        return default
    return str(value).lower() in ("1", "true", "yes", "on")


def page_args(args, default_per_page=10, max_per_page=100):
    """Read page/per_page from a request's query args, clamped to limits."""
    page = args.get('page', 1, type=int) or 1
    per_page = args.get('per_page', default_per_page, type=int) or default_per_page
    return max(page, 1), min(max(per_page, 1), max_per_page)
