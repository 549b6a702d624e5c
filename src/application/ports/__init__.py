"""Application ports package."""

from .database import DatabaseEnginePort
from .financial_repository import (
    FinancialRepositoryPort,
    LedgerRepositoryPort,
    SalesRepositoryPort,
)

__all__ = [
    "DatabaseEnginePort",
    "FinancialRepositoryPort",
    "LedgerRepositoryPort",
    "SalesRepositoryPort",
]
