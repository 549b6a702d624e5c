"""Helpers for parsing calendar dates from loosely typed values."""

from datetime import date, datetime


def parse_date(value) -> date | None:
    """Return the calendar date of a date, datetime or ISO string.

    Timestamps such as ``2024-01-05T10:00:00+00:00`` keep only their date
    part. Unparseable values return None.

    Args:
        value: Raw date value from the store or a caller.

    Returns:
        date | None: Parsed date, or None when the value is not a date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    candidate = value.strip()
    if not candidate:
        return None
    try:
        return date.fromisoformat(candidate[:10])
    except ValueError:
        return None


def parse_datetime(value) -> datetime | None:
    """Return a datetime from a datetime or ISO string, else None."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    candidate = value.strip()
    if candidate.endswith("Z"):
        candidate = candidate[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(candidate)
    except ValueError:
        return None


__all__ = ["parse_date", "parse_datetime"]
