"""Domain validation helpers."""

from datetime import date
from decimal import Decimal

from src.domain.constants import (
    GRANULARITIES,
    SALE_STATUSES,
    TRANSACTION_TYPES,
)
from src.domain.exceptions import InvalidFilterError
from src.domain.models import (
    FinancialFilters,
    TransactionChanges,
    TransactionDraft,
)
from src.domain.services.normalization import (
    normalize_status,
    normalize_transaction_type,
)


def validate_filters(filters: FinancialFilters) -> FinancialFilters:
    """Check filter types and ranges and return the normalized filters.

    Args:
        filters: Filters supplied by the caller.

    Returns:
        FinancialFilters: Filters with blank identifiers removed.

    Raises:
        InvalidFilterError: If a field has the wrong type or the date range
            is inverted.
    """
    if not isinstance(filters, FinancialFilters):
        raise InvalidFilterError(
            f"Expected FinancialFilters, got {type(filters).__name__}"
        )
    for field_name in ("company_id", "user_id"):
        value = getattr(filters, field_name)
        if value is not None and not isinstance(value, str):
            raise InvalidFilterError(
                f"{field_name} must be a string, got {type(value).__name__}"
            )
    for field_name in ("start_date", "end_date"):
        value = getattr(filters, field_name)
        if value is not None and not isinstance(value, date):
            raise InvalidFilterError(
                f"{field_name} must be a date, got {type(value).__name__}"
            )
    if (
        filters.start_date is not None
        and filters.end_date is not None
        and filters.start_date > filters.end_date
    ):
        raise InvalidFilterError(
            f"start_date {filters.start_date} is after end_date "
            f"{filters.end_date}"
        )
    return filters.normalized()


def validate_period_arguments(period_count: int, granularity: str) -> str:
    """Check bucketing arguments and return the normalized granularity.

    Raises:
        InvalidFilterError: If the count is not a positive integer or the
            granularity is unknown.
    """
    if isinstance(period_count, bool) or not isinstance(period_count, int):
        raise InvalidFilterError("period_count must be an integer")
    if period_count < 1:
        raise InvalidFilterError(
            f"period_count must be at least 1, got {period_count}"
        )
    cleaned = (granularity or "").strip().lower()
    if cleaned not in GRANULARITIES:
        raise InvalidFilterError(
            f"Unknown granularity '{granularity}'. "
            f"Expected one of {', '.join(GRANULARITIES)}."
        )
    return cleaned


def validate_transaction_draft(draft: TransactionDraft) -> TransactionDraft:
    """Check a new ledger transaction before it is written.

    Raises:
        InvalidFilterError: If the type, amount or date is invalid.
    """
    transaction_type = normalize_transaction_type(draft.type)
    if transaction_type not in TRANSACTION_TYPES:
        raise InvalidFilterError(
            f"Transaction type must be income or expense, got '{draft.type}'"
        )
    validate_amount(draft.amount)
    if not isinstance(draft.date, date):
        raise InvalidFilterError("Transaction date is required")
    return TransactionDraft(
        type=transaction_type,
        amount=draft.amount,
        date=draft.date,
        company_id=draft.company_id,
        user_id=draft.user_id,
        description=draft.description,
        category=draft.category,
    )


def validate_transaction_changes(changes: TransactionChanges) -> None:
    """Check the supplied fields of a ledger transaction update.

    Raises:
        InvalidFilterError: If the new amount or date is invalid.
    """
    if changes.amount is not None:
        validate_amount(changes.amount)
    if changes.date is not None and not isinstance(changes.date, date):
        raise InvalidFilterError(
            f"Transaction date must be a date, got {changes.date!r}"
        )


def validate_amount(amount: Decimal) -> None:
    """Reject amounts that are not finite, non-negative Decimals."""
    if not isinstance(amount, Decimal) or not amount.is_finite():
        raise InvalidFilterError(f"Amount must be a Decimal, got {amount!r}")
    if amount < 0:
        raise InvalidFilterError(f"Amount must not be negative: {amount}")


def validate_sale_status(status: str) -> str:
    """Return the normalized sale status or raise for unknown values."""
    cleaned = normalize_status(status)
    if cleaned not in SALE_STATUSES:
        raise InvalidFilterError(
            f"Unknown sale status '{status}'. "
            f"Expected one of {', '.join(SALE_STATUSES)}."
        )
    return cleaned


__all__ = [
    "validate_filters",
    "validate_period_arguments",
    "validate_transaction_draft",
    "validate_transaction_changes",
    "validate_amount",
    "validate_sale_status",
]
