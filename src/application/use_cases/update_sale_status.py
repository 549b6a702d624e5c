"""Use case to move a product sale through its statuses."""

from datetime import datetime, timezone
from typing import Callable

from src.application.ports.financial_repository import SalesRepositoryPort
from src.domain.constants import SALE_REVENUE_STATUSES
from src.domain.exceptions import SaleNotFoundError
from src.domain.models import ProductSale
from src.domain.services.normalization import normalize_status
from src.domain.services.validation import validate_sale_status
from src.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UpdateSaleStatusUseCase:
    """Change a sale status, stamping ``sold_at`` when it becomes sold.

    A sale that is already sold keeps its original ``sold_at`` so it is
    realized exactly once.
    """

    def __init__(
        self,
        sales_repository: SalesRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            sales_repository: Port providing sale reads and status writes.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current timestamp.
        """
        self._repository = sales_repository
        self._logger = logger or get_app_logger()
        self._clock = clock or _utc_now

    def execute(self, sale_id: str, status: str) -> ProductSale:
        """Store the new status and return the updated sale.

        Raises:
            InvalidFilterError: If the status is unknown.
            SaleNotFoundError: If no sale has this id.
        """
        new_status = validate_sale_status(status)
        sale = self._repository.get_product_sale(sale_id)
        if sale is None:
            raise SaleNotFoundError(sale_id)

        now = self._clock()
        was_sold = normalize_status(sale.status) in SALE_REVENUE_STATUSES
        sold_at = sale.sold_at
        if new_status in SALE_REVENUE_STATUSES and not (was_sold and sold_at):
            sold_at = now

        updated = self._repository.update_sale_status(
            sale_id,
            new_status,
            sold_at,
            now,
        )
        if updated is None:
            raise SaleNotFoundError(sale_id)
        self._logger.info(
            f"Sale {sale_id} moved from {sale.status} to {new_status}"
        )
        return updated


__all__ = ["UpdateSaleStatusUseCase"]
