"""Domain models for stored invoices and expenses."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from finance_tracker.domain.constants import InvoiceStatus, RecurringInterval


@dataclass(frozen=True)
class LineItem:
    """Informational line on an invoice."""

    description: str
    quantity: Decimal
    price: Decimal

    @property
    def total(self) -> Decimal:
        """Return quantity times unit price."""
        return self.quantity * self.price


@dataclass(frozen=True)
class Invoice:
    """Invoice as held by the record store.

    Attributes:
        id: Store-assigned identifier.
        client_name: Billed client.
        amount: Authoritative invoice total.
        status: Lifecycle status; only PAID invoices count as income.
        date: Issue timestamp.
        client_email: Optional client contact.
        due_date: Optional payment due date.
        is_recurring: Whether the invoice repeats.
        recurring_interval: Repeat interval when recurring.
        line_items: Ordered lines, or None for legacy records created
            before line items existed.
    """

    id: str
    client_name: str
    amount: Decimal
    status: InvoiceStatus
    date: datetime
    client_email: str | None = None
    due_date: date | None = None
    is_recurring: bool = False
    recurring_interval: RecurringInterval | None = None
    line_items: tuple[LineItem, ...] | None = None

    @property
    def is_legacy(self) -> bool:
        """Return True when the record predates line items."""
        return self.line_items is None

    @property
    def items_total(self) -> Decimal | None:
        """Return the sum of line totals, or None for legacy records."""
        if self.line_items is None:
            return None
        return sum(
            (item.total for item in self.line_items),
            Decimal("0"),
        )


@dataclass(frozen=True)
class Expense:
    """Expense as held by the record store."""

    id: str
    category: str
    amount: Decimal
    date: datetime
    description: str | None = None


__all__ = ["LineItem", "Invoice", "Expense"]
