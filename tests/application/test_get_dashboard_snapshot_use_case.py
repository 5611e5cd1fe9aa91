"""Tests for the GetDashboardSnapshotUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_tracker.application.use_cases.get_dashboard_snapshot import (
    GetDashboardSnapshotUseCase,
)
from finance_tracker.domain.constants import InvoiceStatus
from finance_tracker.domain.errors import DataUnavailableError
from finance_tracker.domain.models import Expense, Invoice
from finance_tracker.infrastructure.memory_repository import (
    InMemoryRecordStore,
)


def _build_repositories(invoices, expenses) -> tuple[MagicMock, MagicMock]:
    invoice_repository = MagicMock()
    invoice_repository.list_all_invoices.return_value = invoices
    expense_repository = MagicMock()
    expense_repository.list_all_expenses.return_value = expenses
    return invoice_repository, expense_repository


def test_execute_reads_both_sets_and_computes_snapshot() -> None:
    """Use case should aggregate every record returned by the store."""
    invoices = [
        Invoice(
            id="inv-1",
            client_name="Acme",
            amount=Decimal("1000"),
            status=InvoiceStatus.PAID,
            date=datetime(2024, 1, 10),
        ),
        Invoice(
            id="inv-2",
            client_name="Globex",
            amount=Decimal("500"),
            status=InvoiceStatus.PENDING,
            date=datetime(2024, 1, 15),
        ),
    ]
    expenses = [
        Expense(
            id="exp-1",
            category="Office",
            amount=Decimal("200"),
            date=datetime(2024, 1, 12),
        )
    ]
    invoice_repository, expense_repository = _build_repositories(
        invoices,
        expenses,
    )
    logger = MagicMock()

    use_case = GetDashboardSnapshotUseCase(
        invoice_repository=invoice_repository,
        expense_repository=expense_repository,
        logger=logger,
    )

    snapshot = use_case.execute()

    assert snapshot.total_income == Decimal("1000")
    assert snapshot.total_expenses == Decimal("200")
    assert snapshot.balance == Decimal("800")
    assert [view.id for view in snapshot.recent_transactions] == [
        "inv-2",
        "exp-1",
        "inv-1",
    ]
    invoice_repository.list_all_invoices.assert_called_once_with()
    expense_repository.list_all_expenses.assert_called_once_with()
    assert logger.info.call_count == 2


def test_execute_propagates_invoice_read_failure() -> None:
    """No snapshot is computed when invoices cannot be read."""
    invoice_repository, expense_repository = _build_repositories([], [])
    failure = DataUnavailableError("Invoices are unavailable")
    invoice_repository.list_all_invoices.side_effect = failure

    use_case = GetDashboardSnapshotUseCase(
        invoice_repository=invoice_repository,
        expense_repository=expense_repository,
        logger=MagicMock(),
    )

    with pytest.raises(DataUnavailableError) as excinfo:
        use_case.execute()

    assert excinfo.value is failure
    expense_repository.list_all_expenses.assert_not_called()


def test_execute_propagates_expense_read_failure() -> None:
    invoice_repository, expense_repository = _build_repositories([], [])
    failure = DataUnavailableError("Expenses are unavailable")
    expense_repository.list_all_expenses.side_effect = failure
    logger = MagicMock()

    use_case = GetDashboardSnapshotUseCase(
        invoice_repository=invoice_repository,
        expense_repository=expense_repository,
        logger=logger,
    )

    with pytest.raises(DataUnavailableError) as excinfo:
        use_case.execute()

    assert excinfo.value is failure
    logger.info.assert_not_called()


def test_execute_recomputes_from_current_store_state() -> None:
    """Each call reflects the records present at request time."""
    store = InMemoryRecordStore()
    use_case = GetDashboardSnapshotUseCase(
        invoice_repository=store,
        expense_repository=store,
        logger=MagicMock(),
    )

    first = use_case.execute()
    store.add_expense(
        Expense(
            id="exp-1",
            category="Travel",
            amount=Decimal("75"),
            date=datetime(2024, 2, 1),
        )
    )
    second = use_case.execute()

    assert first.total_expenses == Decimal("0")
    assert second.total_expenses == Decimal("75")
    assert second.balance == Decimal("-75")
