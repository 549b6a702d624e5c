"""Domain models for financial aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class FinancialSummary:
    """Totals of realized income and ledger expenses.

    Attributes:
        total_income: Income transactions, sold sales and approved or paid
            invoices.
        total_expenses: Expense transactions only.
        net_profit: total_income minus total_expenses.
        income_count: Number of rows summed into total_income.
        expense_count: Number of rows summed into total_expenses.
    """

    total_income: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    income_count: int
    expense_count: int

    @classmethod
    def empty(cls) -> "FinancialSummary":
        """Return a summary with every figure at zero."""
        return cls(
            total_income=Decimal("0"),
            total_expenses=Decimal("0"),
            net_profit=Decimal("0"),
            income_count=0,
            expense_count=0,
        )


@dataclass(frozen=True)
class PeriodBucket:
    """Income and expenses accumulated over one calendar period."""

    label: str
    start: date
    income: Decimal
    expenses: Decimal


@dataclass(frozen=True)
class PeriodBreakdown:
    """Fixed-width series of buckets for charting."""

    granularity: str
    buckets: list[PeriodBucket]

    @property
    def average_income(self) -> Decimal:
        """Return the mean income per bucket."""
        if not self.buckets:
            return Decimal("0")
        total = sum((bucket.income for bucket in self.buckets), Decimal("0"))
        return total / len(self.buckets)

    @property
    def average_expenses(self) -> Decimal:
        """Return the mean expenses per bucket."""
        if not self.buckets:
            return Decimal("0")
        total = sum((bucket.expenses for bucket in self.buckets), Decimal("0"))
        return total / len(self.buckets)


@dataclass(frozen=True)
class StaffSalesStats:
    """Sold sales attributed to one seller."""

    staff_id: str | None
    staff_name: str
    sales_count: int
    revenue: Decimal


@dataclass(frozen=True)
class SalesStats:
    """Realized product sale figures for the sales screens.

    Attributes:
        total_sales: Sold sales matching the filters.
        total_revenue: Sum of their amounts.
        today_sales: Sales realized on the current calendar day.
        today_revenue: Revenue realized on the current calendar day.
        monthly_sales: Sales realized since the start of the current month.
        monthly_revenue: Revenue realized since the start of the month.
        staff_stats: Per-seller totals, highest revenue first.
    """

    total_sales: int
    total_revenue: Decimal
    today_sales: int
    today_revenue: Decimal
    monthly_sales: int
    monthly_revenue: Decimal
    staff_stats: list[StaffSalesStats]


__all__ = [
    "FinancialSummary",
    "PeriodBucket",
    "PeriodBreakdown",
    "StaffSalesStats",
    "SalesStats",
]
