"""Use case to report realized product sale statistics."""

from datetime import datetime, timezone
from typing import Callable

from src.application.ports.financial_repository import (
    FinancialRepositoryPort,
    SalesRepositoryPort,
)
from src.domain.constants import SALE_REVENUE_STATUSES
from src.domain.models import FinancialFilters, SalesStats
from src.domain.services.sales import compute_sales_stats
from src.domain.services.validation import validate_filters
from src.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GetSalesStatsUseCase:
    """Summarize sold sales overall, today, this month and by seller."""

    def __init__(
        self,
        financial_repository: FinancialRepositoryPort,
        sales_repository: SalesRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            financial_repository: Port providing product sale reads.
            sales_repository: Port resolving seller display names.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current timestamp.
        """
        self._financial_repository = financial_repository
        self._sales_repository = sales_repository
        self._logger = logger or get_app_logger()
        self._clock = clock or _utc_now

    def execute(self, filters: FinancialFilters | None = None) -> SalesStats:
        """Return sale statistics for the filters.

        Args:
            filters: Optional company, seller and ``created_at`` range.

        Returns:
            SalesStats: Totals, today and month-to-date figures and
            per-seller totals.

        Raises:
            InvalidFilterError: If the filters are malformed.
            FinancialQueryError: If a read fails.
        """
        resolved = validate_filters(filters or FinancialFilters())
        sales = self._financial_repository.fetch_product_sales(
            resolved,
            SALE_REVENUE_STATUSES,
        )
        seller_ids = [sale.sold_by for sale in sales if sale.sold_by]
        names = self._sales_repository.fetch_staff_names(seller_ids)
        stats = compute_sales_stats(
            sales,
            self._clock(),
            names,
            logger=self._logger,
        )
        self._logger.info(
            f"Sales stats: {stats.total_sales} sales, "
            f"revenue={stats.total_revenue}, today={stats.today_revenue}, "
            f"month={stats.monthly_revenue}"
        )
        return stats


__all__ = ["GetSalesStatsUseCase"]
