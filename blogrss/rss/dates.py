"""Timestamp parsing and RFC-1123 formatting for feed dates."""

from datetime import datetime, timezone
from email.utils import format_datetime

from dateutil import parser as date_parser


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a date string from an article page.

    Accepts ISO 8601 as well as looser human-readable forms. Values without
    a timezone are taken as UTC.

    Args:
        value: Raw text from a meta tag or ``<time>`` element

    Returns:
        A UTC-aware datetime, or None if the text is empty or not a date
    """
    if not value or not value.strip():
        return None
    try:
        parsed = date_parser.parse(value.strip())
    except (ValueError, OverflowError):
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_rfc1123(dt: datetime) -> str:
    """Format a datetime as RFC-1123 text, e.g. ``Fri, 05 Jan 2024 00:00:00 GMT``."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt.astimezone(timezone.utc), usegmt=True)


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)
