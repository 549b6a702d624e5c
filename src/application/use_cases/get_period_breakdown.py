"""Use case to bucket ledger transactions into trailing periods."""

from datetime import date

from src.application.ports.financial_repository import FinancialRepositoryPort
from src.domain.constants import DEFAULT_PERIOD_COUNT, GRANULARITY_MONTH
from src.domain.models import FinancialFilters, PeriodBreakdown
from src.domain.services.periods import bucket_by_period, period_starts
from src.domain.services.validation import (
    validate_filters,
    validate_period_arguments,
)
from src.infrastructure.logging.logger import get_app_logger


class GetPeriodBreakdownUseCase:
    """Fetch ledger transactions for a window and bucket them for charts."""

    def __init__(
        self,
        financial_repository: FinancialRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            financial_repository: Port providing ledger transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = financial_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        filters: FinancialFilters | None = None,
        period_count: int = DEFAULT_PERIOD_COUNT,
        granularity: str = GRANULARITY_MONTH,
        today: date | None = None,
    ) -> PeriodBreakdown:
        """Return ``period_count`` buckets ending at the current period.

        The read is narrowed to the generated window. Caller date bounds
        can narrow it further but never widen it.

        Args:
            filters: Optional company, user and date restrictions.
            period_count: Number of trailing periods.
            granularity: ``day``, ``week``, ``month`` or ``year``.
            today: Reference date, defaults to the current date.

        Returns:
            PeriodBreakdown: Zero-filled buckets, oldest first.
        """
        resolved = validate_filters(filters or FinancialFilters())
        granularity = validate_period_arguments(period_count, granularity)
        reference = today or date.today()
        window_start = period_starts(reference, period_count, granularity)[0]

        start_date = max(resolved.start_date or window_start, window_start)
        end_date = min(resolved.end_date or reference, reference)
        transactions = []
        if start_date <= end_date:
            transactions = self._repository.fetch_transactions(
                FinancialFilters(
                    company_id=resolved.company_id,
                    user_id=resolved.user_id,
                    start_date=start_date,
                    end_date=end_date,
                )
            )
        self._logger.info(
            f"Fetched {len(transactions)} transactions for {period_count} "
            f"{granularity} buckets from {start_date} to {end_date}"
        )

        buckets = bucket_by_period(
            transactions,
            period_count,
            granularity,
            today=reference,
            logger=self._logger,
        )
        return PeriodBreakdown(granularity=granularity, buckets=buckets)


__all__ = ["GetPeriodBreakdownUseCase", "PeriodBreakdown"]
