"""Composition root for wiring infrastructure adapters."""

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.records_repository import (
    ExpenseRepositoryPort,
    InvoiceRepositoryPort,
)
from finance_tracker.application.use_cases.get_dashboard_snapshot import (
    GetDashboardSnapshotUseCase,
)
from finance_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finance_tracker.infrastructure.expense_repository import (
    SqlAlchemyExpenseRepository,
)
from finance_tracker.infrastructure.invoice_repository import (
    SqlAlchemyInvoiceRepository,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.memory_repository import (
    InMemoryRecordStore,
)
from finance_tracker.infrastructure.settings import (
    SUPPORTED_BACKENDS,
    FinanceSettings,
)


_memory_store: InMemoryRecordStore | None = None


def _get_memory_store() -> InMemoryRecordStore:
    global _memory_store
    if _memory_store is None:
        _memory_store = InMemoryRecordStore()
    return _memory_store


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def _resolve_backend(settings: FinanceSettings | None) -> str:
    resolved = settings or FinanceSettings.from_env()
    if resolved.backend not in SUPPORTED_BACKENDS:
        raise ValueError(
            "Unsupported record store backend: "
            f"{resolved.backend}. Expected sqlalchemy or memory."
        )
    return resolved.backend


def build_invoice_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: FinanceSettings | None = None,
) -> InvoiceRepositoryPort:
    """Return the configured invoice repository."""
    if _resolve_backend(settings) == "memory":
        return _get_memory_store()
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyInvoiceRepository(resolved_db, logger=get_app_logger())


def build_expense_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: FinanceSettings | None = None,
) -> ExpenseRepositoryPort:
    """Return the configured expense repository."""
    if _resolve_backend(settings) == "memory":
        return _get_memory_store()
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyExpenseRepository(resolved_db, logger=get_app_logger())


def build_dashboard_snapshot_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: FinanceSettings | None = None,
) -> GetDashboardSnapshotUseCase:
    """Return the dashboard use case wired to the configured store."""
    resolved_settings = settings or FinanceSettings.from_env()
    resolved_db = db_port
    if resolved_settings.backend == "sqlalchemy" and resolved_db is None:
        resolved_db = build_database_adapter()
    return GetDashboardSnapshotUseCase(
        invoice_repository=build_invoice_repository(
            resolved_db,
            resolved_settings,
        ),
        expense_repository=build_expense_repository(
            resolved_db,
            resolved_settings,
        ),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_invoice_repository",
    "build_expense_repository",
    "build_dashboard_snapshot_use_case",
]
