"""Tests for the GetPeriodBreakdownUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_period_breakdown import (
    GetPeriodBreakdownUseCase,
)
from src.domain.exceptions import InvalidFilterError
from src.domain.models import FinancialFilters, Transaction


def test_execute_reads_window_and_buckets_by_month() -> None:
    """The read is narrowed to the generated window."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        Transaction(
            id="t1",
            type="income",
            amount=Decimal("120"),
            date=date(2024, 2, 10),
        ),
        Transaction(
            id="t2",
            type="expense",
            amount=Decimal("45"),
            date=date(2024, 3, 2),
        ),
    ]
    use_case = GetPeriodBreakdownUseCase(repository, logger=MagicMock())

    breakdown = use_case.execute(
        FinancialFilters(company_id="c1"),
        period_count=3,
        today=date(2024, 3, 15),
    )

    repository.fetch_transactions.assert_called_once_with(
        FinancialFilters(
            company_id="c1",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 3, 15),
        )
    )
    assert breakdown.granularity == "month"
    assert [bucket.label for bucket in breakdown.buckets] == [
        "Jan 24",
        "Feb 24",
        "Mar 24",
    ]
    assert breakdown.buckets[1].income == Decimal("120")
    assert breakdown.buckets[2].expenses == Decimal("45")
    assert breakdown.average_income == Decimal("40")
    assert breakdown.average_expenses == Decimal("15")


def test_caller_dates_only_narrow_the_window() -> None:
    """A start date before the window is clamped to the window start."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = []
    use_case = GetPeriodBreakdownUseCase(repository, logger=MagicMock())

    use_case.execute(
        FinancialFilters(
            start_date=date(2020, 1, 1),
            end_date=date(2024, 3, 10),
        ),
        period_count=2,
        today=date(2024, 3, 15),
    )

    repository.fetch_transactions.assert_called_once_with(
        FinancialFilters(
            start_date=date(2024, 2, 1),
            end_date=date(2024, 3, 10),
        )
    )


def test_disjoint_caller_range_skips_the_read() -> None:
    """A range outside the window yields zero buckets without a read."""
    repository = MagicMock()
    use_case = GetPeriodBreakdownUseCase(repository, logger=MagicMock())

    breakdown = use_case.execute(
        FinancialFilters(end_date=date(2020, 1, 1)),
        period_count=6,
        today=date(2024, 3, 15),
    )

    repository.fetch_transactions.assert_not_called()
    assert len(breakdown.buckets) == 6
    assert breakdown.average_income == Decimal("0")


def test_invalid_granularity_raises() -> None:
    """Unknown granularities fail before any read."""
    repository = MagicMock()
    use_case = GetPeriodBreakdownUseCase(repository, logger=MagicMock())

    with pytest.raises(InvalidFilterError):
        use_case.execute(granularity="fortnight")
    repository.fetch_transactions.assert_not_called()
