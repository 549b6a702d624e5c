"""CLI adapter printing the financial summary and period breakdown."""

from datetime import date
import os
import sys

from src.domain.constants import DEFAULT_PERIOD_COUNT, GRANULARITY_MONTH
from src.domain.exceptions import FinancialQueryError, InvalidFilterError
from src.domain.models import FinancialFilters
from src.infrastructure.container import (
    build_database_adapter,
    build_financial_summary_use_case,
    build_period_breakdown_use_case,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _parse_period_count(value: str | None, logger) -> int:
    if not value:
        return DEFAULT_PERIOD_COUNT
    try:
        return int(value)
    except ValueError:
        logger.warning(
            f"Invalid period count '{value}', using {DEFAULT_PERIOD_COUNT}."
        )
        return DEFAULT_PERIOD_COUNT


def main() -> int:
    """Print the summary and breakdown for filters read from the env.

    Returns:
        int: Process exit code, non-zero when a read failed.
    """
    logger = get_app_logger()
    filters = FinancialFilters(
        company_id=os.getenv("FINANCE_COMPANY_ID"),
        user_id=os.getenv("FINANCE_USER_ID"),
        start_date=_parse_date(os.getenv("FINANCE_START_DATE"), logger),
        end_date=_parse_date(os.getenv("FINANCE_END_DATE"), logger),
    )
    period_count = _parse_period_count(
        os.getenv("FINANCE_PERIOD_COUNT"),
        logger,
    )
    granularity = os.getenv("FINANCE_GRANULARITY", GRANULARITY_MONTH)

    try:
        settings = build_settings()
    except RuntimeError as exc:
        logger.error(str(exc))
        return 1
    db_adapter = build_database_adapter(settings)
    summary_use_case = build_financial_summary_use_case(settings, db_adapter)
    breakdown_use_case = build_period_breakdown_use_case(settings, db_adapter)

    get_usage_logger().info(
        f"financial_summary_cli filters={filters} "
        f"periods={period_count} granularity={granularity}"
    )
    try:
        summary = summary_use_case.execute(filters)
        breakdown = breakdown_use_case.execute(
            filters,
            period_count=period_count,
            granularity=granularity,
        )
    except (FinancialQueryError, InvalidFilterError) as exc:
        logger.error(f"Financial report failed: {exc}")
        return 1
    finally:
        db_adapter.dispose()

    print(
        "Financial summary "
        f"(company={filters.company_id}, user={filters.user_id}, "
        f"start={filters.start_date}, end={filters.end_date})"
    )
    print(
        f"income={summary.total_income} ({summary.income_count} rows), "
        f"expenses={summary.total_expenses} ({summary.expense_count} rows), "
        f"net_profit={summary.net_profit}"
    )
    print(f"Breakdown by {breakdown.granularity}:")
    for bucket in breakdown.buckets:
        print(
            f"  {bucket.label}: income={bucket.income}, "
            f"expenses={bucket.expenses}"
        )
    print(
        f"Averages: income={breakdown.average_income:.2f}, "
        f"expenses={breakdown.average_expenses:.2f}"
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
