"""Bounded retries for store operations."""

import time
from typing import Callable, TypeVar

from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from src.domain.exceptions import FinancialQueryError


T = TypeVar("T")

TRANSIENT_ERRORS = (OperationalError, PoolTimeoutError)


def run_with_retries(
    operation: Callable[[], T],
    *,
    description: str,
    logger,
    max_retries: int = 3,
    backoff_seconds: float = 0.5,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Run a store operation, retrying transient failures with backoff.

    Connection and timeout errors are retried up to ``max_retries`` times,
    waiting ``backoff_seconds * 2 ** attempt`` between attempts. Any other
    SQLAlchemy error fails immediately.

    Args:
        operation: Callable performing the read or write.
        description: Short label used in log and error messages.
        logger: Logger used for warnings and errors.
        max_retries: Retries after the first attempt.
        backoff_seconds: Base delay before the first retry.
        sleep: Function used to wait between attempts.

    Returns:
        The operation result.

    Raises:
        FinancialQueryError: If the operation fails for good.
    """
    for attempt in range(max_retries + 1):
        try:
            return operation()
        except TRANSIENT_ERRORS as exc:
            if attempt < max_retries:
                delay = backoff_seconds * (2 ** attempt)
                logger.warning(
                    f"{description} attempt {attempt + 1} failed: {exc}. "
                    f"Retrying in {delay}s..."
                )
                sleep(delay)
                continue
            logger.error(
                f"{description} failed after {attempt + 1} attempts: {exc}"
            )
            raise FinancialQueryError(
                f"{description} failed after {attempt + 1} attempts"
            ) from exc
        except SQLAlchemyError as exc:
            logger.error(f"{description} failed: {exc}")
            raise FinancialQueryError(f"{description} failed: {exc}") from exc
    raise FinancialQueryError(f"{description} failed")


__all__ = ["run_with_retries", "TRANSIENT_ERRORS"]
