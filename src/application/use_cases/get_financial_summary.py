"""Use case to compute the financial summary across revenue sources."""

from concurrent.futures import Future, ThreadPoolExecutor, wait

from src.application.ports.financial_repository import FinancialRepositoryPort
from src.domain.constants import (
    INVOICE_REVENUE_STATUSES,
    SALE_REVENUE_STATUSES,
)
from src.domain.exceptions import FinancialQueryError
from src.domain.models import FinancialFilters, FinancialSummary
from src.domain.services.finance import compute_financial_summary
from src.domain.services.validation import validate_filters
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialSummaryUseCase:
    """Compute income, expenses and net profit for a set of filters.

    The ledger, sales and invoice reads run concurrently and are joined
    before combining. If any read fails the whole summary fails.
    """

    def __init__(
        self,
        financial_repository: FinancialRepositoryPort,
        logger=None,
        max_workers: int = 3,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            financial_repository: Port providing the three revenue sources.
            logger: Optional logger compatible with logging.Logger-like API.
            max_workers: Threads used for the concurrent reads.
            timeout_seconds: Optional bound on the whole join.
        """
        self._repository = financial_repository
        self._logger = logger or get_app_logger()
        self._max_workers = max(1, max_workers)
        self._timeout_seconds = timeout_seconds

    def execute(
        self,
        filters: FinancialFilters | None = None,
    ) -> FinancialSummary:
        """Return the summary for the filters.

        Args:
            filters: Optional restrictions; None means no restriction.

        Returns:
            FinancialSummary: Combined totals and counts.

        Raises:
            InvalidFilterError: If the filters are malformed.
            FinancialQueryError: If any read fails or the join times out.
        """
        resolved = validate_filters(filters or FinancialFilters())
        executor = ThreadPoolExecutor(
            max_workers=self._max_workers,
            thread_name_prefix="financial-summary",
        )
        try:
            futures = {
                "transactions": executor.submit(
                    self._repository.fetch_transactions,
                    resolved,
                ),
                "product_sales": executor.submit(
                    self._repository.fetch_product_sales,
                    resolved,
                    SALE_REVENUE_STATUSES,
                ),
                "invoices": executor.submit(
                    self._repository.fetch_invoices,
                    resolved,
                    INVOICE_REVENUE_STATUSES,
                ),
            }
            results = self._join(futures)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        transactions = results["transactions"]
        sales = results["product_sales"]
        invoices = results["invoices"]
        self._logger.info(
            f"Fetched {len(transactions)} transactions, {len(sales)} sales "
            f"and {len(invoices)} invoices for {resolved}"
        )

        summary = compute_financial_summary(
            transactions,
            sales,
            invoices,
            logger=self._logger,
        )
        self._logger.info(
            f"Financial summary computed: income={summary.total_income}, "
            f"expenses={summary.total_expenses}, "
            f"net_profit={summary.net_profit}"
        )
        return summary

    def _join(self, futures: dict[str, Future]) -> dict[str, list]:
        """Wait for every read and return their results by name.

        Raises:
            FinancialQueryError: If a read failed or did not finish in time.
        """
        _, pending = wait(futures.values(), timeout=self._timeout_seconds)
        if pending:
            names = sorted(
                name for name, future in futures.items() if future in pending
            )
            self._logger.error(
                f"Financial reads timed out after {self._timeout_seconds}s: "
                f"{', '.join(names)}"
            )
            raise FinancialQueryError(
                f"Timed out waiting for {', '.join(names)}"
            )

        results: dict[str, list] = {}
        for name, future in futures.items():
            exc = future.exception()
            if exc is None:
                results[name] = future.result()
                continue
            self._logger.error(f"Failed to read {name}: {exc}")
            if isinstance(exc, FinancialQueryError):
                raise exc
            raise FinancialQueryError(f"Failed to read {name}: {exc}") from exc
        return results


__all__ = ["GetFinancialSummaryUseCase", "FinancialSummary"]
