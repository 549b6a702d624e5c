"""Database infrastructure for the finance services.

This module exposes a concrete adapter that creates and reuses a SQLAlchemy
engine connected to the Supabase Postgres database. It belongs to the
infrastructure layer because it deals with an external system.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import FinanceSettings


def _build_connect_args(db_url: str, timeout_seconds: float) -> dict:
    """Return driver arguments for SSL and statement timeouts.

    Args:
        db_url: Fully qualified database URL.
        timeout_seconds: Statement timeout applied to each connection.

    Returns:
        dict: Arguments for the Postgres driver; empty for other backends.
    """
    url = make_url(db_url)
    if not url.drivername.startswith("postgresql"):
        return {}
    connect_args: dict[str, object] = {
        "connect_timeout": max(1, int(timeout_seconds)),
        "options": f"-c statement_timeout={int(timeout_seconds * 1000)}",
    }
    if url.host and url.host.endswith("supabase.co"):
        connect_args["sslmode"] = "require"
    return connect_args


def _create_engine(db_url: str, timeout_seconds: float = 30.0) -> Engine:
    """Create a configured SQLAlchemy engine for the ERP database.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)
        timeout_seconds: Statement and connection timeout.

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        connect_args=_build_connect_args(db_url, timeout_seconds),
    )


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation owning one SQLAlchemy engine.

    The engine is created lazily on first use and lives as long as the
    adapter, so separate adapters never share connection pools.
    """

    def __init__(self, settings: FinanceSettings) -> None:
        """Initialize the adapter.

        Args:
            settings: Database URL and timeout configuration.
        """
        self._settings = settings
        self._engine: Engine | None = None

    def get_engine(self) -> Engine:
        """Get the engine for the ERP database.

        Returns:
            Engine: SQLAlchemy engine connected to Supabase Postgres.
        """
        if self._engine is None:
            self._engine = _create_engine(
                self._settings.db_url,
                self._settings.query_timeout_seconds,
            )
        return self._engine

    def dispose(self) -> None:
        """Close pooled connections and forget the engine."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


__all__ = ["SqlAlchemyDatabaseEngineAdapter"]
