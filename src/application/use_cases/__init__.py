"""Application use cases package."""

from .get_financial_summary import (
    GetFinancialSummaryUseCase,
    FinancialSummary,
)
from .get_period_breakdown import (
    GetPeriodBreakdownUseCase,
    PeriodBreakdown,
)
from .get_sales_stats import GetSalesStatsUseCase
from .get_transactions import GetTransactionUseCase, GetTransactionsUseCase
from .record_transaction import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
    UpdateTransactionUseCase,
)
from .update_sale_status import UpdateSaleStatusUseCase

__all__ = [
    "GetFinancialSummaryUseCase",
    "FinancialSummary",
    "GetPeriodBreakdownUseCase",
    "PeriodBreakdown",
    "GetSalesStatsUseCase",
    "GetTransactionUseCase",
    "GetTransactionsUseCase",
    "CreateTransactionUseCase",
    "DeleteTransactionUseCase",
    "UpdateTransactionUseCase",
    "UpdateSaleStatusUseCase",
]
