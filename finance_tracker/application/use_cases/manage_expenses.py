"""Use cases for recording, listing and deleting expenses."""

from collections.abc import Callable
from datetime import datetime
from decimal import Decimal

from finance_tracker.application.ports.records_repository import (
    ExpenseRepositoryPort,
)
from finance_tracker.domain.models import Expense
from finance_tracker.domain.services.validation import (
    parse_amount,
    validate_expense,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.utils.date_utils import coerce_datetime
from finance_tracker.utils.utils import new_record_id


class ListExpensesUseCase:
    """Return every stored expense, newest first."""

    def __init__(self, expense_repository: ExpenseRepositoryPort) -> None:
        self._expense_repository = expense_repository

    def execute(self) -> list[Expense]:
        return self._expense_repository.list_all_expenses()


class CreateExpenseUseCase:
    """Validate and store a new expense."""

    def __init__(
        self,
        expense_repository: ExpenseRepositoryPort,
        logger=None,
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            expense_repository: Port persisting expenses.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Optional callable returning new record ids.
            clock: Optional callable returning the current timestamp.
        """
        self._expense_repository = expense_repository
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory or new_record_id
        self._clock = clock or datetime.now

    def execute(
        self,
        category: str,
        amount: Decimal | str | float,
        date: datetime | None = None,
        description: str | None = None,
    ) -> Expense:
        """Create an expense dated now unless a date is given.

        Raises:
            RecordValidationError: If the expense is invalid or the
                amount is not a finite number.
        """
        expense = Expense(
            id=self._id_factory(),
            category=category,
            amount=parse_amount(amount),
            date=coerce_datetime(date or self._clock()),
            description=description or None,
        )
        validate_expense(expense)
        stored = self._expense_repository.add_expense(expense)
        self._logger.info(
            f"Created expense {stored.id} in {stored.category}: "
            f"{stored.amount}"
        )
        return stored


class DeleteExpenseUseCase:
    """Remove an expense from the store."""

    def __init__(
        self,
        expense_repository: ExpenseRepositoryPort,
        logger=None,
    ) -> None:
        self._expense_repository = expense_repository
        self._logger = logger or get_app_logger()

    def execute(self, expense_id: str) -> None:
        self._expense_repository.delete_expense(expense_id)
        self._logger.info(f"Deleted expense {expense_id}")


__all__ = [
    "ListExpensesUseCase",
    "CreateExpenseUseCase",
    "DeleteExpenseUseCase",
]
