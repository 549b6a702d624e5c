"""Domain models for ledger, sale and invoice records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """Manually entered ledger income or expense.

    Attributes:
        id: Store identifier.
        type: ``income`` or ``expense``.
        amount: Non-negative amount.
        date: Calendar date of the entry, None when unparseable.
    """

    id: str
    type: str
    amount: Decimal
    date: date | None
    company_id: str | None = None
    user_id: str | None = None
    description: str | None = None
    category: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class ProductSale:
    """Sale of a product, counted as revenue once its status is ``sold``."""

    id: str
    company_id: str | None
    sold_by: str | None
    status: str
    total_amount: Decimal
    created_at: datetime | None = None
    sold_at: datetime | None = None


@dataclass(frozen=True)
class Invoice:
    """Invoice, counted as revenue once approved or paid."""

    id: str
    company_id: str | None
    created_by: str | None
    status: str
    total: Decimal
    created_at: datetime | None = None


@dataclass(frozen=True)
class TransactionDraft:
    """Values for a new ledger transaction."""

    type: str
    amount: Decimal
    date: date
    company_id: str | None = None
    user_id: str | None = None
    description: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class TransactionChanges:
    """Partial update of a ledger transaction; None fields are untouched."""

    amount: Decimal | None = None
    description: str | None = None
    category: str | None = None
    date: date | None = None

    def as_dict(self) -> dict[str, object]:
        """Return only the fields that were supplied."""
        values = {
            "amount": self.amount,
            "description": self.description,
            "category": self.category,
            "date": self.date,
        }
        return {key: value for key, value in values.items() if value is not None}


__all__ = [
    "Transaction",
    "ProductSale",
    "Invoice",
    "TransactionDraft",
    "TransactionChanges",
]
