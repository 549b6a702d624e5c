"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_PAGE_SIZE
from src.infrastructure.logging.logger import get_app_logger


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for the ERP database and the financial reads.

    Attributes:
        db_url: SQLAlchemy URL of the Supabase Postgres database.
        page_size: Rows fetched per page by repository reads.
        query_timeout_seconds: Per-statement and join timeout.
        max_retries: Retries on transient connection errors.
        retry_backoff_seconds: Base delay, doubled on each retry.
        max_workers: Threads used for concurrent reads.
    """

    db_url: str
    page_size: int = DEFAULT_PAGE_SIZE
    query_timeout_seconds: float = 30.0
    max_retries: int = 3
    retry_backoff_seconds: float = 0.5
    max_workers: int = 3

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables and a ``.env`` file.

        Returns:
            FinanceSettings: Settings sourced from environment variables.

        Raises:
            RuntimeError: If SUPABASE_DB_URL is not set.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            db_url=_get_env_var("SUPABASE_DB_URL"),
            page_size=cls._read_number(
                "FINANCE_PAGE_SIZE", DEFAULT_PAGE_SIZE, int, logger
            ),
            query_timeout_seconds=cls._read_number(
                "FINANCE_QUERY_TIMEOUT_SECONDS", 30.0, float, logger
            ),
            max_retries=cls._read_number(
                "FINANCE_MAX_RETRIES", 3, int, logger, minimum=0
            ),
            retry_backoff_seconds=cls._read_number(
                "FINANCE_RETRY_BACKOFF_SECONDS", 0.5, float, logger, minimum=0
            ),
            max_workers=cls._read_number(
                "FINANCE_MAX_WORKERS", 3, int, logger
            ),
        )

    @staticmethod
    def _read_number(name: str, default, cast, logger, minimum=None):
        """Read a numeric variable, falling back to the default when invalid.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            cast: ``int`` or ``float``.
            logger: Logger used for warnings.
            minimum: Smallest accepted value; defaults to strictly positive.

        Returns:
            The parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = cast(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}, using {default}")
            return default
        too_small = value < minimum if minimum is not None else value <= 0
        if too_small:
            logger.warning(f"Out of range {name}={raw!r}, using {default}")
            return default
        return value


__all__ = ["FinanceSettings"]
