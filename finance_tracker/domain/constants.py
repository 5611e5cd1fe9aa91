"""Domain constants for the finance tracker."""

from enum import Enum


class InvoiceStatus(str, Enum):
    """Lifecycle status of an invoice."""

    PENDING = "PENDING"
    PAID = "PAID"
    OVERDUE = "OVERDUE"


class RecurringInterval(str, Enum):
    """Billing interval of a recurring invoice."""

    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class TransactionKind(str, Enum):
    """Discriminant of a recent-activity entry."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


RECENT_TRANSACTIONS_LIMIT = 5
DEFAULT_INVOICE_STATUS = InvoiceStatus.PENDING
DEFAULT_RECURRING_INTERVAL = RecurringInterval.MONTHLY


__all__ = [
    "InvoiceStatus",
    "RecurringInterval",
    "TransactionKind",
    "RECENT_TRANSACTIONS_LIMIT",
    "DEFAULT_INVOICE_STATUS",
    "DEFAULT_RECURRING_INTERVAL",
]
