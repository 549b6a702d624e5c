"""Use cases to read ledger transactions for presentation layers."""

from src.application.ports.financial_repository import (
    FinancialRepositoryPort,
    LedgerRepositoryPort,
)
from src.domain.constants import DEFAULT_PAGE_SIZE, TRANSACTION_TYPES
from src.domain.exceptions import InvalidFilterError
from src.domain.models import FinancialFilters, Transaction
from src.domain.services.normalization import normalize_transaction_type
from src.domain.services.validation import validate_filters


class GetTransactionsUseCase:
    """List ledger transactions, newest first."""

    def __init__(self, financial_repository: FinancialRepositoryPort) -> None:
        """Initialize the use case with its required dependencies."""
        self._repository = financial_repository

    def execute(
        self,
        filters: FinancialFilters | None = None,
        transaction_type: str | None = None,
        max_rows: int | None = DEFAULT_PAGE_SIZE,
    ) -> list[Transaction]:
        """Return transactions matching the filters.

        Args:
            filters: Optional company, user and date restrictions.
            transaction_type: Optional ``income`` or ``expense`` restriction.
            max_rows: Cap on returned rows; None reads every page.

        Returns:
            list[Transaction]: Matching transactions ordered by date desc.
        """
        resolved = validate_filters(filters or FinancialFilters())
        cleaned_type = normalize_transaction_type(transaction_type)
        if cleaned_type is not None and cleaned_type not in TRANSACTION_TYPES:
            raise InvalidFilterError(
                f"Unknown transaction type '{transaction_type}'"
            )
        if max_rows is not None and max_rows < 1:
            raise InvalidFilterError("max_rows must be at least 1")
        return self._repository.fetch_transactions(
            resolved,
            transaction_type=cleaned_type,
            max_rows=max_rows,
        )


class GetTransactionUseCase:
    """Read one ledger transaction by id."""

    def __init__(self, ledger_repository: LedgerRepositoryPort) -> None:
        """Initialize the use case with its required dependencies."""
        self._repository = ledger_repository

    def execute(self, transaction_id: str) -> Transaction | None:
        """Return the transaction, or None when it does not exist."""
        return self._repository.get_transaction(transaction_id)


__all__ = ["GetTransactionsUseCase", "GetTransactionUseCase"]
