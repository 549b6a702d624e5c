"""Tests for the ledger transaction use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.record_transaction import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
    UpdateTransactionUseCase,
)
from src.domain.exceptions import InvalidFilterError, TransactionNotFoundError
from src.domain.models import (
    Transaction,
    TransactionChanges,
    TransactionDraft,
)


def _stored(amount: str = "42.00") -> Transaction:
    return Transaction(
        id="t1",
        type="expense",
        amount=Decimal(amount),
        date=date(2024, 5, 2),
        company_id="c1",
        description="Office rent",
    )


def test_create_validates_and_inserts() -> None:
    """A valid draft is normalized and written."""
    repository = MagicMock()
    repository.insert_transaction.return_value = _stored()
    use_case = CreateTransactionUseCase(repository, logger=MagicMock())

    result = use_case.execute(
        TransactionDraft(
            type="Expense",
            amount=Decimal("42.00"),
            date=date(2024, 5, 2),
            company_id="c1",
            description="Office rent",
        )
    )

    assert result.id == "t1"
    written = repository.insert_transaction.call_args.args[0]
    assert written.type == "expense"


def test_create_rejects_negative_amounts() -> None:
    """Amounts are non-negative; the type carries the direction."""
    repository = MagicMock()
    use_case = CreateTransactionUseCase(repository, logger=MagicMock())

    with pytest.raises(InvalidFilterError):
        use_case.execute(
            TransactionDraft(
                type="expense",
                amount=Decimal("-5"),
                date=date(2024, 5, 2),
            )
        )
    repository.insert_transaction.assert_not_called()


def test_update_applies_supplied_fields() -> None:
    """Only the provided fields are passed to the repository."""
    repository = MagicMock()
    repository.update_transaction.return_value = _stored("50.00")
    use_case = UpdateTransactionUseCase(repository, logger=MagicMock())
    changes = TransactionChanges(amount=Decimal("50.00"))

    result = use_case.execute("t1", changes)

    assert result.amount == Decimal("50.00")
    repository.update_transaction.assert_called_once_with("t1", changes)
    assert changes.as_dict() == {"amount": Decimal("50.00")}


def test_update_missing_transaction_raises() -> None:
    """Updating an unknown id is reported."""
    repository = MagicMock()
    repository.update_transaction.return_value = None
    use_case = UpdateTransactionUseCase(repository, logger=MagicMock())

    with pytest.raises(TransactionNotFoundError):
        use_case.execute("missing", TransactionChanges(category="Travel"))


def test_update_without_changes_returns_current_row() -> None:
    """An empty change set does not issue an UPDATE."""
    repository = MagicMock()
    repository.get_transaction.return_value = _stored()
    use_case = UpdateTransactionUseCase(repository, logger=MagicMock())

    result = use_case.execute("t1", TransactionChanges())

    assert result == _stored()
    repository.update_transaction.assert_not_called()


def test_delete_missing_transaction_raises() -> None:
    """Deleting an unknown id is reported."""
    repository = MagicMock()
    repository.delete_transaction.return_value = False
    use_case = DeleteTransactionUseCase(repository, logger=MagicMock())

    with pytest.raises(TransactionNotFoundError):
        use_case.execute("missing")


def test_delete_removes_transaction() -> None:
    """A successful delete returns nothing."""
    repository = MagicMock()
    repository.delete_transaction.return_value = True
    use_case = DeleteTransactionUseCase(repository, logger=MagicMock())

    assert use_case.execute("t1") is None
    repository.delete_transaction.assert_called_once_with("t1")


def test_update_moves_transaction_date() -> None:
    """A new date is passed to the repository as a date."""
    repository = MagicMock()
    repository.update_transaction.return_value = _stored()
    use_case = UpdateTransactionUseCase(repository, logger=MagicMock())
    changes = TransactionChanges(date=date(2024, 6, 1))

    use_case.execute("t1", changes)

    repository.update_transaction.assert_called_once_with("t1", changes)
    assert changes.as_dict() == {"date": date(2024, 6, 1)}


@pytest.mark.parametrize("bad_date", ["garbage", "2024-06-01", 20240601])
def test_update_rejects_non_date_values(bad_date) -> None:
    """Only date objects may be written to the date column."""
    repository = MagicMock()
    use_case = UpdateTransactionUseCase(repository, logger=MagicMock())

    with pytest.raises(InvalidFilterError):
        use_case.execute("t1", TransactionChanges(date=bad_date))
    repository.update_transaction.assert_not_called()
    repository.get_transaction.assert_not_called()
