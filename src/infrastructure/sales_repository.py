"""SQLAlchemy-backed repository for sale status changes and seller names."""

from datetime import datetime

from sqlalchemy import bindparam, text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.financial_repository import SalesRepositoryPort
from src.domain.models import ProductSale
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.retry import run_with_retries
from src.infrastructure.row_mapper import (
    PRODUCT_SALE_COLUMNS,
    map_product_sale,
    map_staff_name,
)


_SALE_SELECT = ", ".join(PRODUCT_SALE_COLUMNS)


class SqlAlchemySalesRepository(SalesRepositoryPort):
    """Repository reading and updating rows of ``product_sales``."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        logger=None,
        max_retries: int = 3,
        retry_backoff_seconds: float = 0.5,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ERP engine.
            logger: Optional logger compatible with logging.Logger-like API.
            max_retries: Retries on transient read failures.
            retry_backoff_seconds: Base delay between retries.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._max_retries = max_retries
        self._retry_backoff_seconds = retry_backoff_seconds

    def get_product_sale(self, sale_id: str) -> ProductSale | None:
        query = text(
            f"SELECT {_SALE_SELECT} FROM product_sales WHERE id = :id"
        )

        def _read():
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                return conn.execute(query, {"id": sale_id}).first()

        row = run_with_retries(
            _read,
            description=f"Read sale {sale_id}",
            logger=self._logger,
            max_retries=self._max_retries,
            backoff_seconds=self._retry_backoff_seconds,
        )
        if row is None:
            return None
        return map_product_sale(row, self._logger)

    def update_sale_status(
        self,
        sale_id: str,
        status: str,
        sold_at: datetime | None,
        updated_at: datetime,
    ) -> ProductSale | None:
        query = text(
            f"""
            UPDATE product_sales
            SET status = :status,
                sold_at = :sold_at,
                updated_at = :updated_at
            WHERE id = :id
            RETURNING {_SALE_SELECT}
            """
        )
        params = {
            "id": sale_id,
            "status": status,
            "sold_at": sold_at,
            "updated_at": updated_at,
        }

        def _write():
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                return conn.execute(query, params).first()

        row = run_with_retries(
            _write,
            description=f"Update sale {sale_id}",
            logger=self._logger,
            max_retries=0,
        )
        if row is None:
            return None
        return map_product_sale(row, self._logger)

    def fetch_staff_names(self, user_ids: list[str]) -> dict[str, str]:
        ids = sorted({user_id for user_id in user_ids if user_id})
        if not ids:
            return {}
        query = text(
            "SELECT id, first_name, last_name FROM users WHERE id IN :ids"
        ).bindparams(bindparam("ids", expanding=True))

        def _read():
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                return conn.execute(query, {"ids": ids}).all()

        rows = run_with_retries(
            _read,
            description="Read staff names",
            logger=self._logger,
            max_retries=self._max_retries,
            backoff_seconds=self._retry_backoff_seconds,
        )
        return dict(map_staff_name(row) for row in rows)


__all__ = ["SqlAlchemySalesRepository"]
