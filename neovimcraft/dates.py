"""
Date helpers shared by the data model and the page templates.

Plugin timestamps are persisted as ISO-8601 strings (GitHub API style,
e.g. "2021-03-04T12:30:00Z").
"""

from datetime import datetime, timezone
from typing import Optional


# Used to order plugins with missing or unparseable timestamps last
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 string into an aware datetime.

    A trailing "Z" is accepted. Naive values are assumed to be UTC.

    Returns:
        datetime, or None when the value is empty or unparseable.
    """
    if not value:
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date(value: Optional[datetime]) -> str:
    """Format a datetime for display, e.g. "Mar 04, 2021"."""
    if value is None:
        return ""
    return value.strftime("%b %d, %Y")


def relative_time(value: Optional[datetime], now: Optional[datetime] = None) -> str:
    """
    Describe how long ago a datetime was, e.g. "3 days ago".

    Args:
        value: The moment to describe.
        now: Reference time. Defaults to the current UTC time.
    """
    if value is None:
        return ""

    if now is None:
        now = datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    total_seconds = int((now - value).total_seconds())
    future = total_seconds < 0
    total_seconds = abs(total_seconds)

    units = [
        ("year", 365 * 24 * 3600),
        ("month", 30 * 24 * 3600),
        ("week", 7 * 24 * 3600),
        ("day", 24 * 3600),
        ("hour", 3600),
        ("minute", 60),
    ]

    for unit, seconds in units:
        amount = total_seconds // seconds
        if amount >= 1:
            label = unit if amount == 1 else f"{unit}s"
            if future:
                return f"in {amount} {label}"
            return f"{amount} {label} ago"

    return "just now"
