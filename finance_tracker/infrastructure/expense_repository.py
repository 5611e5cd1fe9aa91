"""SQLAlchemy-backed repository for expenses."""

from sqlalchemy import DateTime, Numeric, bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.records_repository import (
    ExpenseRepositoryPort,
)
from finance_tracker.domain.errors import (
    DataUnavailableError,
    RecordNotFoundError,
)
from finance_tracker.domain.models import Expense
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.record_mapping import (
    expense_from_row,
    expense_to_params,
)


SELECT_EXPENSES_SQL = text(
    """
    SELECT id, category, amount, date, description
    FROM expenses
    ORDER BY date DESC
    """
).columns(date=DateTime)

INSERT_EXPENSE_SQL = text(
    """
    INSERT INTO expenses (id, category, amount, date, description)
    VALUES (:id, :category, :amount, :date, :description)
    """
).bindparams(
    bindparam("amount", type_=Numeric(12, 2)),
    bindparam("date", type_=DateTime()),
)

DELETE_EXPENSE_SQL = text("DELETE FROM expenses WHERE id = :id")


class SqlAlchemyExpenseRepository(ExpenseRepositoryPort):
    """Expense store backed by SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def list_all_expenses(self) -> list[Expense]:
        """Return every expense, newest first.

        Raises:
            DataUnavailableError: If the database cannot be read or a
                stored row is malformed.
        """
        try:
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                rows = conn.execute(SELECT_EXPENSES_SQL).all()
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to read expenses: {exc}")
            raise DataUnavailableError("Expenses are unavailable") from exc
        return [self._decode(row) for row in rows]

    def _decode(self, row) -> Expense:
        try:
            return expense_from_row(row)
        except (TypeError, ValueError) as exc:
            self._logger.error(f"Malformed expense row {row.id}: {exc}")
            raise DataUnavailableError("Expenses are unavailable") from exc

    def add_expense(self, expense: Expense) -> Expense:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_EXPENSE_SQL, expense_to_params(expense))
        return expense

    def delete_expense(self, expense_id: str) -> None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(DELETE_EXPENSE_SQL, {"id": expense_id})
        if result.rowcount == 0:
            raise RecordNotFoundError("Expense", expense_id)


__all__ = [
    "SqlAlchemyExpenseRepository",
    "SELECT_EXPENSES_SQL",
    "INSERT_EXPENSE_SQL",
    "DELETE_EXPENSE_SQL",
]
