"""Application ports package."""

from .database import DatabaseEnginePort
from .records_repository import ExpenseRepositoryPort, InvoiceRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "ExpenseRepositoryPort",
    "InvoiceRepositoryPort",
]
