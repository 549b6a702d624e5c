"""Domain exceptions for revenue aggregation."""


class FinancialQueryError(RuntimeError):
    """A read or write against the financial store failed."""


class InvalidFilterError(ValueError):
    """Filters or bucketing arguments have an invalid shape."""


class TransactionNotFoundError(LookupError):
    """No ledger transaction exists for the requested id."""


class SaleNotFoundError(LookupError):
    """No product sale exists for the requested id."""


__all__ = [
    "FinancialQueryError",
    "InvalidFilterError",
    "TransactionNotFoundError",
    "SaleNotFoundError",
]
