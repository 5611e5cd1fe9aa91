"""SQLAlchemy-backed repository for invoices."""

from sqlalchemy import Boolean, Date, DateTime, Numeric, bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.records_repository import (
    InvoiceRepositoryPort,
)
from finance_tracker.domain.errors import (
    DataUnavailableError,
    RecordNotFoundError,
)
from finance_tracker.domain.models import Invoice
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.record_mapping import (
    invoice_from_row,
    invoice_to_params,
)


INVOICE_COLUMNS = (
    "id, client_name, client_email, amount, status, date, due_date, "
    "is_recurring, recurring_interval, items"
)

_RESULT_TYPES = {
    "date": DateTime,
    "due_date": Date,
    "is_recurring": Boolean,
}


def _write_params() -> tuple:
    return (
        bindparam("amount", type_=Numeric(12, 2)),
        bindparam("date", type_=DateTime()),
        bindparam("due_date", type_=Date()),
        bindparam("is_recurring", type_=Boolean()),
    )


SELECT_INVOICES_SQL = text(
    f"""
    SELECT {INVOICE_COLUMNS}
    FROM invoices
    ORDER BY date DESC
    """
).columns(**_RESULT_TYPES)

SELECT_INVOICE_SQL = text(
    f"""
    SELECT {INVOICE_COLUMNS}
    FROM invoices
    WHERE id = :id
    """
).columns(**_RESULT_TYPES)

INSERT_INVOICE_SQL = text(
    """
    INSERT INTO invoices (
        id,
        client_name,
        client_email,
        amount,
        status,
        date,
        due_date,
        is_recurring,
        recurring_interval,
        items
    )
    VALUES (
        :id,
        :client_name,
        :client_email,
        :amount,
        :status,
        :date,
        :due_date,
        :is_recurring,
        :recurring_interval,
        :items
    )
    """
).bindparams(*_write_params())

UPDATE_INVOICE_SQL = text(
    """
    UPDATE invoices
    SET client_name = :client_name,
        client_email = :client_email,
        amount = :amount,
        status = :status,
        date = :date,
        due_date = :due_date,
        is_recurring = :is_recurring,
        recurring_interval = :recurring_interval,
        items = :items
    WHERE id = :id
    """
).bindparams(*_write_params())

DELETE_INVOICE_SQL = text("DELETE FROM invoices WHERE id = :id")


class SqlAlchemyInvoiceRepository(InvoiceRepositoryPort):
    """Invoice store backed by SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def list_all_invoices(self) -> list[Invoice]:
        """Return every invoice, newest first.

        Raises:
            DataUnavailableError: If the database cannot be read or a
                stored row is malformed.
        """
        try:
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                rows = conn.execute(SELECT_INVOICES_SQL).all()
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to read invoices: {exc}")
            raise DataUnavailableError("Invoices are unavailable") from exc
        return [self._decode(row) for row in rows]

    def get_invoice(self, invoice_id: str) -> Invoice:
        try:
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_INVOICE_SQL,
                    {"id": invoice_id},
                ).first()
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to read invoice {invoice_id}: {exc}")
            raise DataUnavailableError("Invoices are unavailable") from exc
        if row is None:
            raise RecordNotFoundError("Invoice", invoice_id)
        return self._decode(row)

    def _decode(self, row) -> Invoice:
        try:
            return invoice_from_row(row, self._logger)
        except (TypeError, ValueError) as exc:
            self._logger.error(f"Malformed invoice row {row.id}: {exc}")
            raise DataUnavailableError("Invoices are unavailable") from exc

    def add_invoice(self, invoice: Invoice) -> Invoice:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_INVOICE_SQL, invoice_to_params(invoice))
        return invoice

    def update_invoice(self, invoice: Invoice) -> Invoice:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                UPDATE_INVOICE_SQL,
                invoice_to_params(invoice),
            )
        if result.rowcount == 0:
            raise RecordNotFoundError("Invoice", invoice.id)
        return invoice

    def delete_invoice(self, invoice_id: str) -> None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(DELETE_INVOICE_SQL, {"id": invoice_id})
        if result.rowcount == 0:
            raise RecordNotFoundError("Invoice", invoice_id)


__all__ = [
    "SqlAlchemyInvoiceRepository",
    "SELECT_INVOICES_SQL",
    "SELECT_INVOICE_SQL",
    "INSERT_INVOICE_SQL",
    "UPDATE_INVOICE_SQL",
    "DELETE_INVOICE_SQL",
]
