"""Mapping between store rows and domain records.

Every read and write goes through these functions, so the snake_case
column names of the ERP tables appear nowhere else.
"""

from collections.abc import Mapping
from typing import Any

from src.domain.models import (
    Invoice,
    ProductSale,
    Transaction,
    TransactionChanges,
    TransactionDraft,
)
from src.domain.services.normalization import (
    normalize_status,
    normalize_transaction_type,
)
from src.utils.date_utils import parse_date, parse_datetime
from src.utils.decimal_utils import coerce_amount


TRANSACTION_COLUMNS = (
    "id",
    "company_id",
    "user_id",
    "type",
    "amount",
    "description",
    "category",
    "date",
    "created_at",
)
PRODUCT_SALE_COLUMNS = (
    "id",
    "company_id",
    "sold_by",
    "status",
    "total_amount",
    "created_at",
    "sold_at",
)
INVOICE_COLUMNS = (
    "id",
    "company_id",
    "created_by",
    "status",
    "total",
    "created_at",
)


def row_mapping(row) -> Mapping[str, Any]:
    """Return the column mapping of a SQLAlchemy row or a plain mapping."""
    mapping = getattr(row, "_mapping", None)
    if mapping is not None:
        return mapping
    return row


def map_transaction(row, logger=None) -> Transaction:
    """Build a Transaction from a ``transactions`` row.

    Non-numeric amounts become zero and unparseable dates become None; both
    are reported on the logger.
    """
    data = row_mapping(row)
    transaction_id = str(data["id"])
    raw_date = data.get("date")
    posted = parse_date(raw_date)
    if posted is None and raw_date is not None and logger is not None:
        logger.warning(
            f"Unparseable date {raw_date!r} on transaction {transaction_id}"
        )
    return Transaction(
        id=transaction_id,
        type=normalize_transaction_type(data.get("type")) or "",
        amount=coerce_amount(
            data.get("amount"), logger, f"on transaction {transaction_id}"
        ),
        date=posted,
        company_id=_optional_str(data.get("company_id")),
        user_id=_optional_str(data.get("user_id")),
        description=data.get("description"),
        category=data.get("category"),
        created_at=parse_datetime(data.get("created_at")),
    )


def map_product_sale(row, logger=None) -> ProductSale:
    """Build a ProductSale from a ``product_sales`` row."""
    data = row_mapping(row)
    sale_id = str(data["id"])
    return ProductSale(
        id=sale_id,
        company_id=_optional_str(data.get("company_id")),
        sold_by=_optional_str(data.get("sold_by")),
        status=normalize_status(data.get("status")) or "",
        total_amount=coerce_amount(
            data.get("total_amount"), logger, f"on sale {sale_id}"
        ),
        created_at=parse_datetime(data.get("created_at")),
        sold_at=parse_datetime(data.get("sold_at")),
    )


def map_invoice(row, logger=None) -> Invoice:
    """Build an Invoice from an ``invoices`` row."""
    data = row_mapping(row)
    invoice_id = str(data["id"])
    return Invoice(
        id=invoice_id,
        company_id=_optional_str(data.get("company_id")),
        created_by=_optional_str(data.get("created_by")),
        status=normalize_status(data.get("status")) or "",
        total=coerce_amount(
            data.get("total"), logger, f"on invoice {invoice_id}"
        ),
        created_at=parse_datetime(data.get("created_at")),
    )


def map_staff_name(row) -> tuple[str, str]:
    """Return the user id and "First Last" name of a ``users`` row."""
    data = row_mapping(row)
    parts = (data.get("first_name"), data.get("last_name"))
    name = " ".join(str(part).strip() for part in parts if part)
    return str(data["id"]), name.strip()


def draft_to_params(draft: TransactionDraft) -> dict[str, Any]:
    """Return insert parameters for a new transaction."""
    return {
        "company_id": draft.company_id,
        "user_id": draft.user_id,
        "type": draft.type,
        "amount": draft.amount,
        "description": draft.description,
        "category": draft.category,
        "date": draft.date,
    }


def changes_to_params(changes: TransactionChanges) -> dict[str, Any]:
    """Return update parameters holding only the supplied fields."""
    return changes.as_dict()


def _optional_str(value) -> str | None:
    if value is None:
        return None
    return str(value)


__all__ = [
    "TRANSACTION_COLUMNS",
    "PRODUCT_SALE_COLUMNS",
    "INVOICE_COLUMNS",
    "row_mapping",
    "map_transaction",
    "map_product_sale",
    "map_invoice",
    "map_staff_name",
    "draft_to_params",
    "changes_to_params",
]
