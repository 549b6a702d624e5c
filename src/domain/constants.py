"""Domain constants for revenue aggregation."""

TRANSACTION_INCOME = "income"
TRANSACTION_EXPENSE = "expense"
TRANSACTION_TYPES = (TRANSACTION_INCOME, TRANSACTION_EXPENSE)

SALE_STATUSES = ("pending", "in-progress", "sold", "cancelled")
INVOICE_STATUSES = (
    "draft",
    "pending",
    "approved",
    "sent",
    "paid",
    "cancelled",
)

# Realized revenue only.
SALE_REVENUE_STATUSES = ("sold",)
INVOICE_REVENUE_STATUSES = ("approved", "paid")

GRANULARITY_DAY = "day"
GRANULARITY_WEEK = "week"
GRANULARITY_MONTH = "month"
GRANULARITY_YEAR = "year"
GRANULARITIES = (
    GRANULARITY_DAY,
    GRANULARITY_WEEK,
    GRANULARITY_MONTH,
    GRANULARITY_YEAR,
)

DEFAULT_PERIOD_COUNT = 6
DEFAULT_PAGE_SIZE = 500

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


__all__ = [
    "TRANSACTION_INCOME",
    "TRANSACTION_EXPENSE",
    "TRANSACTION_TYPES",
    "SALE_STATUSES",
    "INVOICE_STATUSES",
    "SALE_REVENUE_STATUSES",
    "INVOICE_REVENUE_STATUSES",
    "GRANULARITY_DAY",
    "GRANULARITY_WEEK",
    "GRANULARITY_MONTH",
    "GRANULARITY_YEAR",
    "GRANULARITIES",
    "DEFAULT_PERIOD_COUNT",
    "DEFAULT_PAGE_SIZE",
    "MONTH_ABBREVIATIONS",
]
