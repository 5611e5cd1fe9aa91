"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_tracker.infrastructure import container
from finance_tracker.infrastructure.expense_repository import (
    SqlAlchemyExpenseRepository,
)
from finance_tracker.infrastructure.invoice_repository import (
    SqlAlchemyInvoiceRepository,
)
from finance_tracker.infrastructure.memory_repository import (
    InMemoryRecordStore,
)
from finance_tracker.infrastructure.settings import FinanceSettings


def test_memory_backend_shares_one_store(monkeypatch) -> None:
    monkeypatch.setattr(container, "_memory_store", None)
    settings = FinanceSettings(backend="memory")

    invoices = container.build_invoice_repository(settings=settings)
    expenses = container.build_expense_repository(settings=settings)

    assert isinstance(invoices, InMemoryRecordStore)
    assert invoices is expenses


def test_sqlalchemy_backend_uses_given_db_port() -> None:
    settings = FinanceSettings(backend="sqlalchemy")
    db_port = MagicMock()

    invoices = container.build_invoice_repository(db_port, settings)
    expenses = container.build_expense_repository(db_port, settings)

    assert isinstance(invoices, SqlAlchemyInvoiceRepository)
    assert isinstance(expenses, SqlAlchemyExpenseRepository)


def test_unknown_backend_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported record store backend"):
        container.build_invoice_repository(
            settings=FinanceSettings(backend="mongo"),
        )


def test_dashboard_use_case_wires_memory_store(monkeypatch) -> None:
    monkeypatch.setattr(container, "_memory_store", None)

    use_case = container.build_dashboard_snapshot_use_case(
        settings=FinanceSettings(backend="memory"),
    )
    snapshot = use_case.execute()

    assert snapshot.total_income == Decimal("0")
    assert snapshot.recent_transactions == ()


def test_dashboard_use_case_builds_database_adapter(monkeypatch) -> None:
    db_port = MagicMock()
    monkeypatch.setattr(container, "build_database_adapter", lambda: db_port)

    use_case = container.build_dashboard_snapshot_use_case(
        settings=FinanceSettings(backend="sqlalchemy"),
    )

    assert use_case._invoice_repository._db_port is db_port
    assert use_case._expense_repository._db_port is db_port
