"""Domain services for realized product sale statistics."""

from collections.abc import Iterable, Mapping
from datetime import datetime
from decimal import Decimal
from logging import Logger

from src.domain.constants import SALE_REVENUE_STATUSES
from src.domain.models import ProductSale, SalesStats, StaffSalesStats
from src.domain.services.normalization import normalize_status
from src.utils.decimal_utils import coerce_amount


UNKNOWN_STAFF_NAME = "Unknown"


def realized_at(sale: ProductSale) -> datetime | None:
    """Return when the sale was realized, falling back to its creation."""
    return sale.sold_at or sale.created_at


def compute_sales_stats(
    sales: Iterable[ProductSale],
    now: datetime,
    staff_names: Mapping[str, str] | None = None,
    *,
    logger: Logger | None = None,
) -> SalesStats:
    """Aggregate sold product sales into totals, recent figures and staff.

    Only ``sold`` rows count, whatever rows the caller passes in. A sale
    belongs to today or to this month according to ``sold_at``, or
    ``created_at`` when it was never stamped. Today covers the whole calendar
    day; the month runs from its first day up to ``now``.

    Args:
        sales: Product sales matching the filters.
        now: Current timestamp; timezone-aware values are compared in the
            timezone of ``now``.
        staff_names: Optional display names keyed by seller id.
        logger: Optional logger used for warnings on malformed amounts.

    Returns:
        SalesStats: Totals, today and month-to-date figures and per-seller
        totals sorted by revenue, highest first.
    """
    names = staff_names or {}
    total_revenue = Decimal("0")
    today_revenue = Decimal("0")
    monthly_revenue = Decimal("0")
    total_sales = today_sales = monthly_sales = 0
    per_staff: dict[str | None, list] = {}

    for sale in sales:
        if normalize_status(sale.status) not in SALE_REVENUE_STATUSES:
            continue
        amount = coerce_amount(
            sale.total_amount,
            logger,
            f"in sale {sale.id}",
        )
        total_sales += 1
        total_revenue += amount

        moment = _as_local(realized_at(sale), now)
        if moment is not None and moment.date() == now.date():
            today_sales += 1
            today_revenue += amount
        if (
            moment is not None
            and (moment.year, moment.month) == (now.year, now.month)
            and moment <= now.replace(tzinfo=None)
        ):
            monthly_sales += 1
            monthly_revenue += amount

        entry = per_staff.setdefault(sale.sold_by, [0, Decimal("0")])
        entry[0] += 1
        entry[1] += amount

    staff_stats = [
        StaffSalesStats(
            staff_id=staff_id,
            staff_name=names.get(staff_id) or UNKNOWN_STAFF_NAME,
            sales_count=count,
            revenue=revenue,
        )
        for staff_id, (count, revenue) in per_staff.items()
    ]
    staff_stats.sort(key=lambda item: (-item.revenue, item.staff_id or ""))

    return SalesStats(
        total_sales=total_sales,
        total_revenue=total_revenue,
        today_sales=today_sales,
        today_revenue=today_revenue,
        monthly_sales=monthly_sales,
        monthly_revenue=monthly_revenue,
        staff_stats=staff_stats,
    )


def _as_local(moment: datetime | None, now: datetime) -> datetime | None:
    # Naive result in the wall clock of ``now``.
    if moment is None:
        return None
    if moment.tzinfo is not None and now.tzinfo is not None:
        moment = moment.astimezone(now.tzinfo)
    return moment.replace(tzinfo=None)


__all__ = ["compute_sales_stats", "realized_at", "UNKNOWN_STAFF_NAME"]
