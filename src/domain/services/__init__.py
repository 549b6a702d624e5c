"""Domain services package."""

from .finance import compute_financial_summary
from .normalization import normalize_status, normalize_transaction_type
from .periods import bucket_by_period, period_label, period_start
from .sales import compute_sales_stats
from .validation import (
    validate_amount,
    validate_filters,
    validate_period_arguments,
    validate_sale_status,
    validate_transaction_changes,
    validate_transaction_draft,
)

__all__ = [
    "bucket_by_period",
    "compute_financial_summary",
    "compute_sales_stats",
    "normalize_status",
    "normalize_transaction_type",
    "period_label",
    "period_start",
    "validate_amount",
    "validate_filters",
    "validate_period_arguments",
    "validate_sale_status",
    "validate_transaction_changes",
    "validate_transaction_draft",
]
