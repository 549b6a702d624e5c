"""Use cases for creating, editing and deleting ledger transactions."""

from src.application.ports.financial_repository import LedgerRepositoryPort
from src.domain.exceptions import TransactionNotFoundError
from src.domain.models import (
    Transaction,
    TransactionChanges,
    TransactionDraft,
)
from src.domain.services.validation import (
    validate_transaction_changes,
    validate_transaction_draft,
)
from src.infrastructure.logging.logger import get_app_logger


class CreateTransactionUseCase:
    """Record a new income or expense in the ledger."""

    def __init__(self, ledger_repository: LedgerRepositoryPort, logger=None):
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger writes.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, draft: TransactionDraft) -> Transaction:
        """Validate and store the draft.

        Raises:
            InvalidFilterError: If the type, amount or date is invalid.
        """
        validated = validate_transaction_draft(draft)
        transaction = self._repository.insert_transaction(validated)
        self._logger.info(
            f"Recorded {transaction.type} transaction {transaction.id} "
            f"of {transaction.amount}"
        )
        return transaction


class UpdateTransactionUseCase:
    """Edit the amount, description, category or date of a transaction."""

    def __init__(self, ledger_repository: LedgerRepositoryPort, logger=None):
        self._repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        transaction_id: str,
        changes: TransactionChanges,
    ) -> Transaction:
        """Apply the supplied fields and return the stored transaction.

        Raises:
            InvalidFilterError: If the new amount or date is invalid.
            TransactionNotFoundError: If no transaction has this id.
        """
        validate_transaction_changes(changes)
        if not changes.as_dict():
            existing = self._repository.get_transaction(transaction_id)
            if existing is None:
                raise TransactionNotFoundError(transaction_id)
            return existing
        transaction = self._repository.update_transaction(
            transaction_id,
            changes,
        )
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)
        self._logger.info(
            f"Updated transaction {transaction_id}: "
            f"{sorted(changes.as_dict())}"
        )
        return transaction


class DeleteTransactionUseCase:
    """Remove a transaction from the ledger."""

    def __init__(self, ledger_repository: LedgerRepositoryPort, logger=None):
        self._repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, transaction_id: str) -> None:
        """Delete the transaction.

        Raises:
            TransactionNotFoundError: If no transaction has this id.
        """
        if not self._repository.delete_transaction(transaction_id):
            raise TransactionNotFoundError(transaction_id)
        self._logger.info(f"Deleted transaction {transaction_id}")


__all__ = [
    "CreateTransactionUseCase",
    "UpdateTransactionUseCase",
    "DeleteTransactionUseCase",
]
