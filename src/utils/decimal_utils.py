"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        InvalidOperation: If the value cannot be read as a number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str) and not value.strip():
        return Decimal("0")
    return Decimal(str(value).strip())


def coerce_amount(value, logger=None, context: str = "") -> Decimal:
    """Normalize a monetary amount, falling back to zero on bad input.

    Args:
        value: Raw amount from a store row.
        logger: Optional logger used to report malformed values.
        context: Short row description included in the warning.

    Returns:
        Decimal: The amount, or Decimal("0") when it is not numeric.
    """
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        amount = None
    if amount is None or not amount.is_finite():
        if logger is not None:
            logger.warning(
                f"Non-numeric amount {value!r} coerced to 0 {context}".rstrip()
            )
        return Decimal("0")
    return amount


__all__ = ["coerce_decimal", "coerce_amount"]
