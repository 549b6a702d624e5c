"""Tests for the bucket_by_period domain service."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.exceptions import InvalidFilterError
from src.domain.models import Transaction
from src.domain.services.periods import (
    bucket_by_period,
    period_label,
    period_start,
)


def _transaction(tx_type: str, amount: str, posted) -> Transaction:
    return Transaction(
        id=f"{tx_type}-{posted}",
        type=tx_type,
        amount=Decimal(amount),
        date=posted,
    )


def test_empty_input_returns_six_zero_months_ending_today() -> None:
    """Six empty monthly buckets, oldest first, ending at this month."""
    buckets = bucket_by_period([], 6, today=date(2024, 3, 15))

    assert [bucket.label for bucket in buckets] == [
        "Oct 23",
        "Nov 23",
        "Dec 23",
        "Jan 24",
        "Feb 24",
        "Mar 24",
    ]
    assert [bucket.start for bucket in buckets][-1] == date(2024, 3, 1)
    assert all(bucket.income == Decimal("0") for bucket in buckets)
    assert all(bucket.expenses == Decimal("0") for bucket in buckets)


def test_transactions_accumulate_into_their_month() -> None:
    """Income and expenses are summed per calendar month."""
    transactions = [
        _transaction("income", "100", date(2024, 1, 5)),
        _transaction("expense", "30", date(2024, 1, 10)),
        _transaction("income", "25.50", date(2024, 3, 1)),
        _transaction("income", "4.50", date(2024, 3, 31)),
    ]

    buckets = bucket_by_period(transactions, 3, today=date(2024, 3, 15))

    assert [(b.label, b.income, b.expenses) for b in buckets] == [
        ("Jan 24", Decimal("100"), Decimal("30")),
        ("Feb 24", Decimal("0"), Decimal("0")),
        ("Mar 24", Decimal("30.00"), Decimal("0")),
    ]


def test_transactions_outside_window_are_ignored() -> None:
    """Dates before the first bucket or after today do not count."""
    transactions = [
        _transaction("income", "10", date(2023, 12, 31)),
        _transaction("income", "20", date(2024, 4, 1)),
        _transaction("income", "5", date(2024, 2, 2)),
    ]

    buckets = bucket_by_period(transactions, 2, today=date(2024, 3, 15))

    assert [bucket.income for bucket in buckets] == [
        Decimal("5"),
        Decimal("0"),
    ]


def test_malformed_dates_are_skipped_not_raised() -> None:
    """Unparseable dates degrade gracefully."""
    logger = MagicMock()
    transactions = [
        _transaction("income", "10", "not-a-date"),
        _transaction("income", "10", None),
        _transaction("income", "7", "2024-03-02T08:00:00+00:00"),
    ]

    buckets = bucket_by_period(
        transactions,
        1,
        today=date(2024, 3, 15),
        logger=logger,
    )

    assert len(buckets) == 1
    assert buckets[0].income == Decimal("7")
    logger.warning.assert_called_once()


def test_window_crosses_year_boundary() -> None:
    """Month keys use both year and month."""
    transactions = [
        _transaction("expense", "8", date(2023, 1, 15)),
        _transaction("expense", "9", date(2024, 1, 15)),
    ]

    buckets = bucket_by_period(transactions, 2, today=date(2024, 1, 20))

    assert [bucket.label for bucket in buckets] == ["Dec 23", "Jan 24"]
    assert buckets[-1].expenses == Decimal("9")


def test_day_granularity() -> None:
    """Daily buckets are labelled with ISO dates."""
    transactions = [_transaction("income", "3", date(2024, 3, 14))]

    buckets = bucket_by_period(
        transactions,
        3,
        "day",
        today=date(2024, 3, 15),
    )

    assert [bucket.label for bucket in buckets] == [
        "2024-03-13",
        "2024-03-14",
        "2024-03-15",
    ]
    assert buckets[1].income == Decimal("3")


def test_week_granularity_starts_on_monday() -> None:
    """Weekly buckets follow ISO weeks."""
    transactions = [
        _transaction("income", "1", date(2024, 3, 11)),
        _transaction("income", "2", date(2024, 3, 17)),
    ]

    buckets = bucket_by_period(
        transactions,
        2,
        "week",
        today=date(2024, 3, 13),
    )

    assert [bucket.start for bucket in buckets] == [
        date(2024, 3, 4),
        date(2024, 3, 11),
    ]
    assert [bucket.label for bucket in buckets] == ["2024-W10", "2024-W11"]
    assert buckets[1].income == Decimal("3")


def test_year_granularity() -> None:
    """Yearly buckets are labelled with the year."""
    transactions = [_transaction("expense", "4", date(2023, 6, 1))]

    buckets = bucket_by_period(
        transactions,
        2,
        "YEAR",
        today=date(2024, 3, 13),
    )

    assert [bucket.label for bucket in buckets] == ["2023", "2024"]
    assert buckets[0].expenses == Decimal("4")


@pytest.mark.parametrize("period_count", [1, 6, 12, 40])
def test_bucket_count_matches_period_count(period_count) -> None:
    """The output width never depends on the data."""
    buckets = bucket_by_period([], period_count, today=date(2024, 3, 15))

    assert len(buckets) == period_count
    starts = [bucket.start for bucket in buckets]
    assert starts == sorted(starts)


@pytest.mark.parametrize("period_count", [0, -1, 2.5, True])
def test_invalid_period_count_raises(period_count) -> None:
    """Bad bucketing arguments fail loudly."""
    with pytest.raises(InvalidFilterError):
        bucket_by_period([], period_count, today=date(2024, 3, 15))


def test_unknown_granularity_raises() -> None:
    """Only day, week, month and year are supported."""
    with pytest.raises(InvalidFilterError):
        bucket_by_period([], 3, "quarter", today=date(2024, 3, 15))


def test_period_helpers() -> None:
    """period_start and period_label agree on month keys."""
    start = period_start(date(2024, 2, 29), "month")

    assert start == date(2024, 2, 1)
    assert period_label(start, "month") == "Feb 24"
