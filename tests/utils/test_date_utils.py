"""Tests for the date parsing helpers."""

from datetime import date, datetime, timezone

from src.utils.date_utils import parse_date, parse_datetime


def test_parse_date_accepts_dates_datetimes_and_strings() -> None:
    """Dates keep their calendar day."""
    assert parse_date(date(2024, 1, 5)) == date(2024, 1, 5)
    assert parse_date(datetime(2024, 1, 5, 23, 59)) == date(2024, 1, 5)
    assert parse_date("2024-01-05") == date(2024, 1, 5)
    assert parse_date("2024-01-05T10:00:00.000Z") == date(2024, 1, 5)


def test_parse_date_returns_none_for_garbage() -> None:
    """Unparseable values do not raise."""
    assert parse_date(None) is None
    assert parse_date("") is None
    assert parse_date("Jan 5th") is None
    assert parse_date(20240105) is None


def test_parse_datetime_handles_utc_suffix() -> None:
    """A trailing Z is read as UTC."""
    parsed = parse_datetime("2024-01-05T10:00:00Z")

    assert parsed == datetime(2024, 1, 5, 10, 0, tzinfo=timezone.utc)
    assert parse_datetime("yesterday") is None
