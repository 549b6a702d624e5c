"""Domain models package."""

from .filters import FinancialFilters
from .finance import (
    FinancialSummary,
    PeriodBreakdown,
    PeriodBucket,
    SalesStats,
    StaffSalesStats,
)
from .records import (
    Invoice,
    ProductSale,
    Transaction,
    TransactionChanges,
    TransactionDraft,
)

__all__ = [
    "FinancialFilters",
    "FinancialSummary",
    "PeriodBreakdown",
    "PeriodBucket",
    "SalesStats",
    "StaffSalesStats",
    "Invoice",
    "ProductSale",
    "Transaction",
    "TransactionChanges",
    "TransactionDraft",
]
