"""Domain normalization helpers."""


def normalize_status(status: str | None) -> str | None:
    """Normalize sale and invoice status values.

    Args:
        status: Raw status value from a repository.

    Returns:
        str | None: Lower-cased status, or None when blank.
    """
    if not status:
        return None
    cleaned = status.strip().lower()
    return cleaned or None


def normalize_transaction_type(transaction_type: str | None) -> str | None:
    """Normalize ledger transaction type values.

    Args:
        transaction_type: Raw type value from a repository or caller.

    Returns:
        str | None: Lower-cased type, or None when blank.
    """
    if not transaction_type:
        return None
    cleaned = transaction_type.strip().lower()
    return cleaned or None


__all__ = ["normalize_status", "normalize_transaction_type"]
