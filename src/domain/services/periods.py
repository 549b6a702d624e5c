"""Domain services for bucketing transactions into calendar periods."""

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    GRANULARITY_DAY,
    GRANULARITY_MONTH,
    GRANULARITY_WEEK,
    GRANULARITY_YEAR,
    MONTH_ABBREVIATIONS,
    TRANSACTION_EXPENSE,
    TRANSACTION_INCOME,
)
from src.domain.models import PeriodBucket, Transaction
from src.domain.services.normalization import normalize_transaction_type
from src.domain.services.validation import validate_period_arguments
from src.utils.date_utils import parse_date
from src.utils.decimal_utils import coerce_amount


def bucket_by_period(
    transactions: Iterable[Transaction],
    period_count: int,
    granularity: str = GRANULARITY_MONTH,
    *,
    today: date | None = None,
    logger: Logger | None = None,
) -> list[PeriodBucket]:
    """Accumulate transactions into trailing calendar periods.

    The result always holds ``period_count`` buckets, oldest first, the last
    one containing ``today``. Periods without activity stay at zero.
    Transactions with an unparseable date are skipped; transactions outside
    the window are ignored.

    Args:
        transactions: Ledger transactions, already fetched.
        period_count: Number of trailing periods to return.
        granularity: ``day``, ``week``, ``month`` or ``year``.
        today: Reference date, defaults to the current date.
        logger: Optional logger used for warnings on skipped rows.

    Returns:
        list[PeriodBucket]: Zero-filled buckets covering the window.

    Raises:
        InvalidFilterError: If period_count or granularity is invalid.
    """
    granularity = validate_period_arguments(period_count, granularity)
    reference = today or date.today()
    starts = period_starts(reference, period_count, granularity)

    income: dict[date, Decimal] = {start: Decimal("0") for start in starts}
    expenses: dict[date, Decimal] = {start: Decimal("0") for start in starts}
    skipped = 0
    for transaction in transactions:
        posted = parse_date(transaction.date)
        if posted is None:
            skipped += 1
            continue
        key = period_start(posted, granularity)
        if key not in income:
            continue
        transaction_type = normalize_transaction_type(transaction.type)
        amount = coerce_amount(transaction.amount, logger, "in bucketing")
        if transaction_type == TRANSACTION_INCOME:
            income[key] += amount
        elif transaction_type == TRANSACTION_EXPENSE:
            expenses[key] += amount

    if skipped and logger is not None:
        logger.warning(
            f"Skipped {skipped} transactions with unparseable dates"
        )

    return [
        PeriodBucket(
            label=period_label(start, granularity),
            start=start,
            income=income[start],
            expenses=expenses[start],
        )
        for start in starts
    ]


def period_start(value: date, granularity: str) -> date:
    """Return the first day of the period containing ``value``."""
    if granularity == GRANULARITY_DAY:
        return value
    if granularity == GRANULARITY_WEEK:
        return value - timedelta(days=value.weekday())
    if granularity == GRANULARITY_YEAR:
        return date(value.year, 1, 1)
    return value.replace(day=1)


def period_starts(
    reference: date,
    period_count: int,
    granularity: str,
) -> list[date]:
    """Return the first day of each trailing period, oldest first."""
    current = period_start(reference, granularity)
    return [
        _shift(current, -offset, granularity)
        for offset in range(period_count - 1, -1, -1)
    ]


def period_label(start: date, granularity: str) -> str:
    """Return the chart label of the period starting at ``start``."""
    if granularity == GRANULARITY_DAY:
        return start.isoformat()
    if granularity == GRANULARITY_WEEK:
        iso_year, iso_week, _ = start.isocalendar()
        return f"{iso_year}-W{iso_week:02d}"
    if granularity == GRANULARITY_YEAR:
        return str(start.year)
    return f"{MONTH_ABBREVIATIONS[start.month - 1]} {start.year % 100:02d}"


def _shift(start: date, periods: int, granularity: str) -> date:
    if granularity == GRANULARITY_DAY:
        return start + timedelta(days=periods)
    if granularity == GRANULARITY_WEEK:
        return start + timedelta(weeks=periods)
    if granularity == GRANULARITY_YEAR:
        return date(start.year + periods, 1, 1)
    month_index = start.year * 12 + (start.month - 1) + periods
    year, month = divmod(month_index, 12)
    return date(year, month + 1, 1)


__all__ = [
    "bucket_by_period",
    "period_start",
    "period_starts",
    "period_label",
]
