"""Tests for the ledger, sale and invoice record models."""

from datetime import date
from decimal import Decimal
import typing

from src.domain.models import TransactionChanges


def test_transaction_changes_date_field_is_typed_as_date() -> None:
    """The ``date`` field annotation resolves to the date class."""
    hints = typing.get_type_hints(TransactionChanges)

    assert typing.get_args(hints["date"]) == (date, type(None))
    assert typing.get_args(hints["amount"]) == (Decimal, type(None))


def test_transaction_changes_only_report_supplied_fields() -> None:
    changes = TransactionChanges(
        description="Rent",
        date=date(2024, 6, 1),
    )

    assert changes.as_dict() == {
        "description": "Rent",
        "date": date(2024, 6, 1),
    }
    assert TransactionChanges().as_dict() == {}