"""Composition root for wiring infrastructure adapters.

Each builder takes its collaborators as optional arguments and only falls
back to building them from the environment, so callers can share one
settings object and one engine adapter across use cases.
"""

from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.application.use_cases.get_period_breakdown import (
    GetPeriodBreakdownUseCase,
)
from src.application.use_cases.get_sales_stats import GetSalesStatsUseCase
from src.application.use_cases.get_transactions import (
    GetTransactionUseCase,
    GetTransactionsUseCase,
)
from src.application.use_cases.record_transaction import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
    UpdateTransactionUseCase,
)
from src.application.use_cases.update_sale_status import (
    UpdateSaleStatusUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.financial_repository import (
    SqlAlchemyFinancialRepository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.sales_repository import SqlAlchemySalesRepository
from src.infrastructure.settings import FinanceSettings


def build_settings() -> FinanceSettings:
    """Return settings read from the environment."""
    return FinanceSettings.from_env()


def build_database_adapter(
    settings: FinanceSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter(settings or build_settings())


def build_financial_repository(
    settings: FinanceSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemyFinancialRepository:
    """Return the repository for ledger, sale and invoice reads."""
    resolved_settings = settings or build_settings()
    resolved_db = db_port or build_database_adapter(resolved_settings)
    return SqlAlchemyFinancialRepository(
        resolved_db,
        logger=get_app_logger(),
        page_size=resolved_settings.page_size,
        max_retries=resolved_settings.max_retries,
        retry_backoff_seconds=resolved_settings.retry_backoff_seconds,
    )


def build_sales_repository(
    settings: FinanceSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemySalesRepository:
    """Return the repository for sale status changes."""
    resolved_settings = settings or build_settings()
    resolved_db = db_port or build_database_adapter(resolved_settings)
    return SqlAlchemySalesRepository(
        resolved_db,
        logger=get_app_logger(),
        max_retries=resolved_settings.max_retries,
        retry_backoff_seconds=resolved_settings.retry_backoff_seconds,
    )


def build_financial_summary_use_case(
    settings: FinanceSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> GetFinancialSummaryUseCase:
    """Return the summary use case with its timeout and worker count."""
    resolved_settings = settings or build_settings()
    return GetFinancialSummaryUseCase(
        build_financial_repository(resolved_settings, db_port),
        logger=get_app_logger(),
        max_workers=resolved_settings.max_workers,
        timeout_seconds=resolved_settings.query_timeout_seconds,
    )


def build_period_breakdown_use_case(
    settings: FinanceSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> GetPeriodBreakdownUseCase:
    """Return the period breakdown use case."""
    return GetPeriodBreakdownUseCase(
        build_financial_repository(settings, db_port),
        logger=get_app_logger(),
    )


def build_transactions_use_case(
    settings: FinanceSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> GetTransactionsUseCase:
    """Return the transaction listing use case."""
    return GetTransactionsUseCase(build_financial_repository(settings, db_port))


def build_transaction_lookup_use_case(
    settings: FinanceSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> GetTransactionUseCase:
    """Return the single transaction lookup use case."""
    return GetTransactionUseCase(build_financial_repository(settings, db_port))


def build_ledger_use_cases(
    settings: FinanceSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> tuple[
    CreateTransactionUseCase,
    UpdateTransactionUseCase,
    DeleteTransactionUseCase,
]:
    """Return the create, update and delete ledger use cases."""
    repository = build_financial_repository(settings, db_port)
    logger = get_app_logger()
    return (
        CreateTransactionUseCase(repository, logger=logger),
        UpdateTransactionUseCase(repository, logger=logger),
        DeleteTransactionUseCase(repository, logger=logger),
    )


def build_sale_status_use_case(
    settings: FinanceSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> UpdateSaleStatusUseCase:
    """Return the sale status use case."""
    return UpdateSaleStatusUseCase(
        build_sales_repository(settings, db_port),
        logger=get_app_logger(),
    )


def build_sales_stats_use_case(
    settings: FinanceSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> GetSalesStatsUseCase:
    """Return the sales statistics use case."""
    resolved_settings = settings or build_settings()
    resolved_db = db_port or build_database_adapter(resolved_settings)
    return GetSalesStatsUseCase(
        build_financial_repository(resolved_settings, resolved_db),
        build_sales_repository(resolved_settings, resolved_db),
        logger=get_app_logger(),
    )


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_financial_repository",
    "build_sales_repository",
    "build_financial_summary_use_case",
    "build_period_breakdown_use_case",
    "build_transactions_use_case",
    "build_transaction_lookup_use_case",
    "build_ledger_use_cases",
    "build_sale_status_use_case",
    "build_sales_stats_use_case",
]
