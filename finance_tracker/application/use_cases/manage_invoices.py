"""Use cases for creating, reading, updating and deleting invoices."""

from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal

from finance_tracker.application.ports.records_repository import (
    InvoiceRepositoryPort,
)
from finance_tracker.domain.constants import (
    DEFAULT_INVOICE_STATUS,
    DEFAULT_RECURRING_INTERVAL,
    InvoiceStatus,
    RecurringInterval,
)
from finance_tracker.domain.errors import RecordValidationError
from finance_tracker.domain.models import Invoice, LineItem
from finance_tracker.domain.services.normalization import (
    normalize_interval,
    normalize_status,
)
from finance_tracker.domain.services.validation import (
    parse_amount,
    validate_invoice,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.utils.date_utils import coerce_datetime
from finance_tracker.utils.utils import new_record_id


class ListInvoicesUseCase:
    """Return every stored invoice, newest first."""

    def __init__(self, invoice_repository: InvoiceRepositoryPort) -> None:
        self._invoice_repository = invoice_repository

    def execute(self) -> list[Invoice]:
        return self._invoice_repository.list_all_invoices()


class GetInvoiceUseCase:
    """Return a single invoice by id."""

    def __init__(self, invoice_repository: InvoiceRepositoryPort) -> None:
        self._invoice_repository = invoice_repository

    def execute(self, invoice_id: str) -> Invoice:
        return self._invoice_repository.get_invoice(invoice_id)


class CreateInvoiceUseCase:
    """Validate and store a new invoice."""

    def __init__(
        self,
        invoice_repository: InvoiceRepositoryPort,
        logger=None,
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            invoice_repository: Port persisting invoices.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Optional callable returning new record ids.
            clock: Optional callable returning the current timestamp.
        """
        self._invoice_repository = invoice_repository
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory or new_record_id
        self._clock = clock or datetime.now

    def execute(
        self,
        client_name: str,
        amount: Decimal | str | float | None = None,
        status: InvoiceStatus | str | None = None,
        date: datetime | None = None,
        client_email: str | None = None,
        due_date: date | None = None,
        is_recurring: bool = False,
        recurring_interval: RecurringInterval | str | None = None,
        line_items: Sequence[LineItem] | None = None,
    ) -> Invoice:
        """Create an invoice.

        Missing values take defaults: status PENDING, date now, amount the
        line-item total, and a MONTHLY interval for recurring invoices.

        Returns:
            Invoice: The stored invoice with its assigned id.

        Raises:
            RecordValidationError: If the invoice is invalid, the amount
                is not a finite number, or neither an amount nor line
                items are given.
        """
        items = tuple(line_items) if line_items is not None else None
        interval = normalize_interval(recurring_interval)
        if is_recurring and interval is None:
            interval = DEFAULT_RECURRING_INTERVAL
        invoice = Invoice(
            id=self._id_factory(),
            client_name=client_name,
            amount=self._resolve_amount(amount, items),
            status=normalize_status(status or DEFAULT_INVOICE_STATUS),
            date=coerce_datetime(date or self._clock()),
            client_email=client_email or None,
            due_date=due_date,
            is_recurring=is_recurring,
            recurring_interval=interval,
            line_items=items,
        )
        validate_invoice(invoice)
        stored = self._invoice_repository.add_invoice(invoice)
        self._logger.info(
            f"Created invoice {stored.id} for {stored.client_name}: "
            f"{stored.amount} ({stored.status.value})"
        )
        return stored

    @staticmethod
    def _resolve_amount(
        amount: Decimal | str | float | None,
        items: tuple[LineItem, ...] | None,
    ) -> Decimal:
        if amount is not None:
            return parse_amount(amount)
        if items:
            return sum((item.total for item in items), Decimal("0"))
        raise RecordValidationError("Invoice amount is required")


class UpdateInvoiceUseCase:
    """Apply a partial update to a stored invoice."""

    def __init__(
        self,
        invoice_repository: InvoiceRepositoryPort,
        logger=None,
    ) -> None:
        self._invoice_repository = invoice_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        invoice_id: str,
        client_name: str | None = None,
        amount: Decimal | str | float | None = None,
        status: InvoiceStatus | str | None = None,
        date: datetime | None = None,
        client_email: str | None = None,
        due_date: date | None = None,
        is_recurring: bool | None = None,
        recurring_interval: RecurringInterval | str | None = None,
        line_items: Sequence[LineItem] | None = None,
    ) -> Invoice:
        """Update the given fields; None leaves a field unchanged.

        Returns:
            Invoice: The stored invoice after the update.

        Raises:
            RecordNotFoundError: If the invoice does not exist.
            RecordValidationError: If the updated invoice is invalid.
        """
        current = self._invoice_repository.get_invoice(invoice_id)
        changes: dict = {}
        if client_name is not None:
            changes["client_name"] = client_name
        if amount is not None:
            changes["amount"] = parse_amount(amount)
        if status is not None:
            changes["status"] = normalize_status(status)
        if date is not None:
            changes["date"] = coerce_datetime(date)
        if client_email is not None:
            changes["client_email"] = client_email or None
        if due_date is not None:
            changes["due_date"] = due_date
        if is_recurring is not None:
            changes["is_recurring"] = is_recurring
            if not is_recurring:
                changes["recurring_interval"] = None
        if recurring_interval is not None:
            changes["recurring_interval"] = normalize_interval(
                recurring_interval
            )
        if line_items is not None:
            changes["line_items"] = tuple(line_items)

        updated = replace(current, **changes)
        if updated.is_recurring and updated.recurring_interval is None:
            updated = replace(
                updated,
                recurring_interval=DEFAULT_RECURRING_INTERVAL,
            )
        validate_invoice(updated)
        stored = self._invoice_repository.update_invoice(updated)
        self._logger.info(
            f"Updated invoice {stored.id}: fields={sorted(changes)}"
        )
        return stored


class DeleteInvoiceUseCase:
    """Remove an invoice from the store."""

    def __init__(
        self,
        invoice_repository: InvoiceRepositoryPort,
        logger=None,
    ) -> None:
        self._invoice_repository = invoice_repository
        self._logger = logger or get_app_logger()

    def execute(self, invoice_id: str) -> None:
        self._invoice_repository.delete_invoice(invoice_id)
        self._logger.info(f"Deleted invoice {invoice_id}")


__all__ = [
    "ListInvoicesUseCase",
    "GetInvoiceUseCase",
    "CreateInvoiceUseCase",
    "UpdateInvoiceUseCase",
    "DeleteInvoiceUseCase",
]
