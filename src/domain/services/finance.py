"""Domain services for revenue aggregation."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    INVOICE_REVENUE_STATUSES,
    SALE_REVENUE_STATUSES,
    TRANSACTION_EXPENSE,
    TRANSACTION_INCOME,
)
from src.domain.models import (
    FinancialSummary,
    Invoice,
    ProductSale,
    Transaction,
)
from src.domain.services.normalization import (
    normalize_status,
    normalize_transaction_type,
)
from src.utils.decimal_utils import coerce_amount


def compute_financial_summary(
    transactions: Iterable[Transaction],
    sales: Iterable[ProductSale],
    invoices: Iterable[Invoice],
    *,
    logger: Logger | None = None,
) -> FinancialSummary:
    """Union ledger, sale and invoice rows into one summary.

    Only sales with status ``sold`` and invoices with status ``approved`` or
    ``paid`` count as income, whatever rows the caller passes in. Sales and
    invoices never count as expenses.

    Args:
        transactions: Ledger transactions matching the filters.
        sales: Product sales matching the filters.
        invoices: Invoices matching the filters.
        logger: Optional logger used for warnings on skipped rows.

    Returns:
        FinancialSummary: Income, expenses, net profit and row counts.
    """
    income_rows: list[Transaction] = []
    expense_rows: list[Transaction] = []
    for transaction in transactions:
        transaction_type = normalize_transaction_type(transaction.type)
        if transaction_type == TRANSACTION_INCOME:
            income_rows.append(transaction)
        elif transaction_type == TRANSACTION_EXPENSE:
            expense_rows.append(transaction)
        elif logger is not None:
            logger.warning(
                f"Skipping transaction {transaction.id} with unknown type "
                f"{transaction.type!r}"
            )

    sold_sales = _realized(sales, SALE_REVENUE_STATUSES, "sale", logger)
    paid_invoices = _realized(
        invoices,
        INVOICE_REVENUE_STATUSES,
        "invoice",
        logger,
    )

    transaction_income = _sum_amounts(
        (row.amount for row in income_rows), logger, "transaction"
    )
    sales_income = _sum_amounts(
        (sale.total_amount for sale in sold_sales), logger, "sale"
    )
    invoice_income = _sum_amounts(
        (invoice.total for invoice in paid_invoices), logger, "invoice"
    )
    total_expenses = _sum_amounts(
        (row.amount for row in expense_rows), logger, "transaction"
    )

    total_income = transaction_income + sales_income + invoice_income
    return FinancialSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        net_profit=total_income - total_expenses,
        income_count=len(income_rows) + len(sold_sales) + len(paid_invoices),
        expense_count=len(expense_rows),
    )


def _realized(rows, statuses, kind: str, logger):
    rows = list(rows)
    kept = [row for row in rows if normalize_status(row.status) in statuses]
    skipped = len(rows) - len(kept)
    if skipped and logger is not None:
        logger.warning(
            f"Ignored {skipped} {kind} rows outside statuses {statuses}"
        )
    return kept


def _sum_amounts(amounts, logger, kind: str) -> Decimal:
    total = Decimal("0")
    for amount in amounts:
        total += coerce_amount(amount, logger, f"in {kind} row")
    return total


__all__ = ["compute_financial_summary"]
