"""Tests for the SQLAlchemy invoice and expense repositories."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text

from finance_tracker.application.use_cases.get_dashboard_snapshot import (
    GetDashboardSnapshotUseCase,
)
from finance_tracker.domain.constants import InvoiceStatus, RecurringInterval
from finance_tracker.domain.errors import (
    DataUnavailableError,
    RecordNotFoundError,
)
from finance_tracker.domain.models import Expense, Invoice, LineItem
from finance_tracker.infrastructure.expense_repository import (
    SqlAlchemyExpenseRepository,
)
from finance_tracker.infrastructure.invoice_repository import (
    SqlAlchemyInvoiceRepository,
)
from finance_tracker.infrastructure.records_schema import ensure_schema


@pytest.fixture
def db_port(tmp_path) -> MagicMock:
    engine = create_engine(f"sqlite:///{tmp_path / 'finance.db'}")
    port = MagicMock()
    port.get_engine.return_value = engine
    yield port
    engine.dispose()


@pytest.fixture
def schema_db_port(db_port) -> MagicMock:
    ensure_schema(db_port, logger=MagicMock())
    return db_port


def _invoice(invoice_id: str, when: datetime, **overrides) -> Invoice:
    values = {
        "id": invoice_id,
        "client_name": "Acme",
        "amount": Decimal("1000.00"),
        "status": InvoiceStatus.PAID,
        "date": when,
    }
    values.update(overrides)
    return Invoice(**values)


def test_invoice_round_trip_preserves_fields(schema_db_port) -> None:
    repository = SqlAlchemyInvoiceRepository(schema_db_port, logger=MagicMock())
    invoice = _invoice(
        "inv-1",
        datetime(2024, 1, 10, 9, 30),
        client_email="billing@acme.test",
        due_date=date(2024, 2, 10),
        is_recurring=True,
        recurring_interval=RecurringInterval.MONTHLY,
        line_items=(
            LineItem("Design", Decimal("2"), Decimal("400")),
            LineItem("Hosting", Decimal("1"), Decimal("200")),
        ),
    )

    repository.add_invoice(invoice)

    assert repository.get_invoice("inv-1") == invoice


def test_legacy_invoice_round_trip(schema_db_port) -> None:
    repository = SqlAlchemyInvoiceRepository(schema_db_port, logger=MagicMock())
    invoice = _invoice("inv-legacy", datetime(2023, 5, 1))

    repository.add_invoice(invoice)
    stored = repository.get_invoice("inv-legacy")

    assert stored.is_legacy is True
    assert stored.amount == Decimal("1000")


def test_list_all_invoices_is_newest_first(schema_db_port) -> None:
    repository = SqlAlchemyInvoiceRepository(schema_db_port, logger=MagicMock())
    repository.add_invoice(_invoice("inv-old", datetime(2024, 1, 1)))
    repository.add_invoice(_invoice("inv-new", datetime(2024, 3, 1)))
    repository.add_invoice(_invoice("inv-mid", datetime(2024, 2, 1)))

    ids = [invoice.id for invoice in repository.list_all_invoices()]

    assert ids == ["inv-new", "inv-mid", "inv-old"]


def test_update_and_delete_invoice(schema_db_port) -> None:
    repository = SqlAlchemyInvoiceRepository(schema_db_port, logger=MagicMock())
    invoice = _invoice(
        "inv-1",
        datetime(2024, 1, 1),
        status=InvoiceStatus.PENDING,
        amount=Decimal("19.99"),
    )
    repository.add_invoice(invoice)

    repository.update_invoice(
        _invoice(
            "inv-1",
            datetime(2024, 1, 1),
            status=InvoiceStatus.OVERDUE,
            amount=Decimal("19.99"),
        )
    )

    stored = repository.get_invoice("inv-1")
    assert stored.status is InvoiceStatus.OVERDUE
    assert stored.amount == Decimal("19.99")

    repository.delete_invoice("inv-1")

    with pytest.raises(RecordNotFoundError):
        repository.get_invoice("inv-1")
    with pytest.raises(RecordNotFoundError):
        repository.delete_invoice("inv-1")
    with pytest.raises(RecordNotFoundError):
        repository.update_invoice(invoice)


def test_expense_repository_round_trip(schema_db_port) -> None:
    repository = SqlAlchemyExpenseRepository(schema_db_port, logger=MagicMock())
    older = Expense(
        id="exp-1",
        category="Office",
        amount=Decimal("200.50"),
        date=datetime(2024, 1, 12),
        description="Chairs",
    )
    newer = Expense(
        id="exp-2",
        category="Travel",
        amount=Decimal("75"),
        date=datetime(2024, 1, 20),
    )
    repository.add_expense(older)
    repository.add_expense(newer)

    assert repository.list_all_expenses() == [newer, older]

    repository.delete_expense("exp-1")

    assert repository.list_all_expenses() == [newer]
    with pytest.raises(RecordNotFoundError):
        repository.delete_expense("exp-1")


def test_read_failures_raise_data_unavailable(db_port) -> None:
    """Reads against a database without tables are reported as unavailable."""
    logger = MagicMock()
    invoices = SqlAlchemyInvoiceRepository(db_port, logger=logger)
    expenses = SqlAlchemyExpenseRepository(db_port, logger=logger)

    with pytest.raises(DataUnavailableError):
        invoices.list_all_invoices()
    with pytest.raises(DataUnavailableError):
        expenses.list_all_expenses()
    assert logger.error.call_count == 2


def test_ensure_schema_is_idempotent(db_port) -> None:
    logger = MagicMock()

    ensure_schema(db_port, logger=logger)
    ensure_schema(db_port, logger=logger)

    assert SqlAlchemyExpenseRepository(
        db_port,
        logger=logger,
    ).list_all_expenses() == []


def _insert_raw_invoice(db_port, **overrides) -> None:
    values = {
        "id": "inv-raw",
        "client_name": "Acme",
        "amount": 100,
        "status": "PAID",
        "date": "2024-01-10 00:00:00.000000",
        "is_recurring": 0,
        "items": None,
    }
    values.update(overrides)
    with db_port.get_engine().begin() as conn:
        conn.execute(
            text(
                """
                INSERT INTO invoices (
                    id, client_name, amount, status, date, is_recurring, items
                )
                VALUES (
                    :id, :client_name, :amount, :status, :date,
                    :is_recurring, :items
                )
                """
            ),
            values,
        )


@pytest.mark.parametrize(
    "items",
    ['{"a": 1}', '[{"description": "Work", "quantity": "abc", "price": 1}]'],
)
def test_malformed_items_do_not_break_the_snapshot(
    schema_db_port,
    items,
) -> None:
    _insert_raw_invoice(schema_db_port, items=items)
    logger = MagicMock()
    use_case = GetDashboardSnapshotUseCase(
        invoice_repository=SqlAlchemyInvoiceRepository(
            schema_db_port,
            logger=logger,
        ),
        expense_repository=SqlAlchemyExpenseRepository(
            schema_db_port,
            logger=logger,
        ),
        logger=logger,
    )

    snapshot = use_case.execute()

    assert snapshot.total_income == Decimal("100")
    assert [view.id for view in snapshot.recent_transactions] == ["inv-raw"]
    logger.warning.assert_called_once()


def test_malformed_invoice_row_is_reported_unavailable(
    schema_db_port,
) -> None:
    _insert_raw_invoice(schema_db_port, status="DRAFT")
    logger = MagicMock()
    repository = SqlAlchemyInvoiceRepository(schema_db_port, logger=logger)

    with pytest.raises(DataUnavailableError):
        repository.list_all_invoices()
    with pytest.raises(DataUnavailableError):
        repository.get_invoice("inv-raw")
    assert logger.error.call_count == 2


def test_malformed_expense_row_is_reported_unavailable(
    schema_db_port,
) -> None:
    with schema_db_port.get_engine().begin() as conn:
        conn.execute(
            text(
                """
                INSERT INTO expenses (id, category, amount, date)
                VALUES ('exp-raw', 'Office', 'abc',
                        '2024-01-10 00:00:00.000000')
                """
            )
        )
    logger = MagicMock()
    repository = SqlAlchemyExpenseRepository(schema_db_port, logger=logger)

    with pytest.raises(DataUnavailableError):
        repository.list_all_expenses()
    logger.error.assert_called_once()
