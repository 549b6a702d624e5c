"""Application ports for ledger, sale and invoice data access."""

from datetime import datetime
from typing import Protocol

from src.domain.models import (
    FinancialFilters,
    Invoice,
    ProductSale,
    Transaction,
    TransactionChanges,
    TransactionDraft,
)


class FinancialRepositoryPort(Protocol):
    """Port exposing the three revenue sources as typed rows."""

    def fetch_transactions(
        self,
        filters: FinancialFilters,
        transaction_type: str | None = None,
        max_rows: int | None = None,
    ) -> list[Transaction]:
        """Return ledger transactions matching the filters, newest first."""

    def fetch_product_sales(
        self,
        filters: FinancialFilters,
        statuses: tuple[str, ...],
    ) -> list[ProductSale]:
        """Return product sales whose status is in ``statuses``."""

    def fetch_invoices(
        self,
        filters: FinancialFilters,
        statuses: tuple[str, ...],
    ) -> list[Invoice]:
        """Return invoices whose status is in ``statuses``."""


class LedgerRepositoryPort(Protocol):
    """Port exposing writes on ledger transactions."""

    def get_transaction(self, transaction_id: str) -> Transaction | None:
        """Return one transaction, or None when it does not exist."""

    def insert_transaction(self, draft: TransactionDraft) -> Transaction:
        """Insert a transaction and return the stored row."""

    def update_transaction(
        self,
        transaction_id: str,
        changes: TransactionChanges,
    ) -> Transaction | None:
        """Apply changes and return the stored row, or None if missing."""

    def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction and return whether a row was removed."""


class SalesRepositoryPort(Protocol):
    """Port exposing product sale status changes."""

    def get_product_sale(self, sale_id: str) -> ProductSale | None:
        """Return one sale, or None when it does not exist."""

    def update_sale_status(
        self,
        sale_id: str,
        status: str,
        sold_at: datetime | None,
        updated_at: datetime,
    ) -> ProductSale | None:
        """Store a new status and return the updated row."""

    def fetch_staff_names(self, user_ids: list[str]) -> dict[str, str]:
        """Return display names of the given users keyed by id."""


__all__ = [
    "FinancialRepositoryPort",
    "LedgerRepositoryPort",
    "SalesRepositoryPort",
]
