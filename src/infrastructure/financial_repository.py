"""SQLAlchemy-backed repository for ledger, sale and invoice data."""

from datetime import date, timedelta

from sqlalchemy import bindparam, text
from sqlalchemy.engine import Connection

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.financial_repository import (
    FinancialRepositoryPort,
    LedgerRepositoryPort,
)
from src.domain.constants import DEFAULT_PAGE_SIZE
from src.domain.models import (
    FinancialFilters,
    Invoice,
    ProductSale,
    Transaction,
    TransactionChanges,
    TransactionDraft,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.retry import run_with_retries
from src.infrastructure.row_mapper import (
    INVOICE_COLUMNS,
    PRODUCT_SALE_COLUMNS,
    TRANSACTION_COLUMNS,
    changes_to_params,
    draft_to_params,
    map_invoice,
    map_product_sale,
    map_transaction,
)


_TRANSACTION_SELECT = ", ".join(TRANSACTION_COLUMNS)
_SALE_SELECT = ", ".join(PRODUCT_SALE_COLUMNS)
_INVOICE_SELECT = ", ".join(INVOICE_COLUMNS)


class SqlAlchemyFinancialRepository(
    FinancialRepositoryPort,
    LedgerRepositoryPort,
):
    """Repository backed by SQLAlchemy for the ERP financial tables.

    Reads are paginated with ``LIMIT/OFFSET`` until a short page comes back
    and retried on transient connection errors. Writes are not retried.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        logger=None,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_retries: int = 3,
        retry_backoff_seconds: float = 0.5,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ERP engine.
            logger: Optional logger compatible with logging.Logger-like API.
            page_size: Rows requested per page.
            max_retries: Retries on transient read failures.
            retry_backoff_seconds: Base delay between retries.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._page_size = max(1, page_size)
        self._max_retries = max_retries
        self._retry_backoff_seconds = retry_backoff_seconds

    def fetch_transactions(
        self,
        filters: FinancialFilters,
        transaction_type: str | None = None,
        max_rows: int | None = None,
    ) -> list[Transaction]:
        sql, params = self._build_transactions_query(filters, transaction_type)
        rows = self._fetch_pages(text(sql), params, "transactions", max_rows)
        return [map_transaction(row, self._logger) for row in rows]

    def fetch_product_sales(
        self,
        filters: FinancialFilters,
        statuses: tuple[str, ...],
    ) -> list[ProductSale]:
        sql, params = self._build_status_query(
            table="product_sales",
            columns=_SALE_SELECT,
            user_column="sold_by",
            filters=filters,
        )
        params["statuses"] = list(statuses)
        query = text(sql).bindparams(bindparam("statuses", expanding=True))
        rows = self._fetch_pages(query, params, "product_sales", None)
        return [map_product_sale(row, self._logger) for row in rows]

    def fetch_invoices(
        self,
        filters: FinancialFilters,
        statuses: tuple[str, ...],
    ) -> list[Invoice]:
        sql, params = self._build_status_query(
            table="invoices",
            columns=_INVOICE_SELECT,
            user_column="created_by",
            filters=filters,
        )
        params["statuses"] = list(statuses)
        query = text(sql).bindparams(bindparam("statuses", expanding=True))
        rows = self._fetch_pages(query, params, "invoices", None)
        return [map_invoice(row, self._logger) for row in rows]

    def get_transaction(self, transaction_id: str) -> Transaction | None:
        query = text(
            f"SELECT {_TRANSACTION_SELECT} FROM transactions WHERE id = :id"
        )

        def _read():
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                return conn.execute(query, {"id": transaction_id}).first()

        row = self._run(_read, f"Read transaction {transaction_id}")
        if row is None:
            return None
        return map_transaction(row, self._logger)

    def insert_transaction(self, draft: TransactionDraft) -> Transaction:
        query = text(
            f"""
            INSERT INTO transactions (
                company_id, user_id, type, amount, description, category, date
            )
            VALUES (
                :company_id, :user_id, :type, :amount, :description,
                :category, :date
            )
            RETURNING {_TRANSACTION_SELECT}
            """
        )

        def _write():
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                return conn.execute(query, draft_to_params(draft)).first()

        row = self._run(_write, "Insert transaction", retry=False)
        return map_transaction(row, self._logger)

    def update_transaction(
        self,
        transaction_id: str,
        changes: TransactionChanges,
    ) -> Transaction | None:
        params = changes_to_params(changes)
        assignments = ", ".join(f"{column} = :{column}" for column in params)
        query = text(
            f"""
            UPDATE transactions
            SET {assignments}
            WHERE id = :id
            RETURNING {_TRANSACTION_SELECT}
            """
        )
        params["id"] = transaction_id

        def _write():
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                return conn.execute(query, params).first()

        row = self._run(
            _write,
            f"Update transaction {transaction_id}",
            retry=False,
        )
        if row is None:
            return None
        return map_transaction(row, self._logger)

    def delete_transaction(self, transaction_id: str) -> bool:
        query = text("DELETE FROM transactions WHERE id = :id RETURNING id")

        def _write():
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                return conn.execute(query, {"id": transaction_id}).first()

        row = self._run(
            _write,
            f"Delete transaction {transaction_id}",
            retry=False,
        )
        return row is not None

    def _run(self, operation, description: str, retry: bool = True):
        return run_with_retries(
            operation,
            description=description,
            logger=self._logger,
            max_retries=self._max_retries if retry else 0,
            backoff_seconds=self._retry_backoff_seconds,
        )

    def _fetch_pages(
        self,
        query,
        params: dict,
        description: str,
        max_rows: int | None,
    ) -> list:
        """Read every page of a query on one connection.

        Args:
            query: Statement ending with ``LIMIT :limit OFFSET :offset``.
            params: Filter parameters.
            description: Source name used in logs and errors.
            max_rows: Optional cap on returned rows.

        Returns:
            list: Raw rows in query order.
        """

        def _read() -> list:
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                return self._read_pages(conn, query, params, max_rows)

        rows = self._run(_read, f"Read {description}")
        self._logger.info(f"Fetched {len(rows)} {description} rows")
        return rows

    def _read_pages(
        self,
        conn: Connection,
        query,
        params: dict,
        max_rows: int | None,
    ) -> list:
        rows: list = []
        offset = 0
        while True:
            limit = self._page_size
            if max_rows is not None:
                limit = min(limit, max_rows - len(rows))
            page = conn.execute(
                query,
                {**params, "limit": limit, "offset": offset},
            ).all()
            rows.extend(page)
            if len(page) < limit:
                break
            if max_rows is not None and len(rows) >= max_rows:
                break
            offset += len(page)
        return rows

    @staticmethod
    def _build_transactions_query(
        filters: FinancialFilters,
        transaction_type: str | None,
    ) -> tuple[str, dict]:
        base_sql = f"""
        SELECT {_TRANSACTION_SELECT}
        FROM transactions
        WHERE 1=1
        """
        params: dict[str, object] = {}
        if filters.company_id:
            base_sql += " AND company_id = :company_id"
            params["company_id"] = filters.company_id
        if filters.user_id:
            base_sql += " AND user_id = :user_id"
            params["user_id"] = filters.user_id
        if transaction_type:
            base_sql += " AND type = :type"
            params["type"] = transaction_type
        if filters.start_date:
            base_sql += " AND date >= :start_date"
            params["start_date"] = filters.start_date
        if filters.end_date:
            base_sql += " AND date <= :end_date"
            params["end_date"] = filters.end_date
        base_sql += " ORDER BY date DESC, id LIMIT :limit OFFSET :offset"
        return base_sql, params

    @staticmethod
    def _build_status_query(
        table: str,
        columns: str,
        user_column: str,
        filters: FinancialFilters,
    ) -> tuple[str, dict]:
        base_sql = f"""
        SELECT {columns}
        FROM {table}
        WHERE status IN :statuses
        """
        params: dict[str, object] = {}
        if filters.company_id:
            base_sql += " AND company_id = :company_id"
            params["company_id"] = filters.company_id
        if filters.user_id:
            base_sql += f" AND {user_column} = :user_id"
            params["user_id"] = filters.user_id
        if filters.start_date:
            base_sql += " AND created_at >= :start_date"
            params["start_date"] = filters.start_date
        if filters.end_date:
            # Timestamps on the end date are still inside the range.
            base_sql += " AND created_at < :end_before"
            params["end_before"] = _next_day(filters.end_date)
        base_sql += " ORDER BY created_at DESC, id LIMIT :limit OFFSET :offset"
        return base_sql, params


def _next_day(value: date) -> date:
    return value + timedelta(days=1)


__all__ = ["SqlAlchemyFinancialRepository"]
