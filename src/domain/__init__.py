"""Domain package for revenue rules and core models."""

from .constants import (
    INVOICE_REVENUE_STATUSES,
    SALE_REVENUE_STATUSES,
    TRANSACTION_TYPES,
)
from .exceptions import (
    FinancialQueryError,
    InvalidFilterError,
    SaleNotFoundError,
    TransactionNotFoundError,
)
from .models import (
    FinancialFilters,
    FinancialSummary,
    Invoice,
    PeriodBreakdown,
    PeriodBucket,
    ProductSale,
    Transaction,
    TransactionChanges,
    TransactionDraft,
)
from .services import bucket_by_period, compute_financial_summary

__all__ = [
    "INVOICE_REVENUE_STATUSES",
    "SALE_REVENUE_STATUSES",
    "TRANSACTION_TYPES",
    "FinancialQueryError",
    "InvalidFilterError",
    "SaleNotFoundError",
    "TransactionNotFoundError",
    "FinancialFilters",
    "FinancialSummary",
    "Invoice",
    "PeriodBreakdown",
    "PeriodBucket",
    "ProductSale",
    "Transaction",
    "TransactionChanges",
    "TransactionDraft",
    "bucket_by_period",
    "compute_financial_summary",
]
