"""Domain package for business rules and core models."""

from .constants import (
    RECENT_TRANSACTIONS_LIMIT,
    InvoiceStatus,
    RecurringInterval,
    TransactionKind,
)
from .errors import (
    DataUnavailableError,
    RecordNotFoundError,
    RecordValidationError,
)
from .models import (
    CategoryTotal,
    DashboardSnapshot,
    Expense,
    Invoice,
    LineItem,
    TransactionView,
)
from .services import compute_dashboard_snapshot, snapshot_to_payload

__all__ = [
    "RECENT_TRANSACTIONS_LIMIT",
    "InvoiceStatus",
    "RecurringInterval",
    "TransactionKind",
    "DataUnavailableError",
    "RecordNotFoundError",
    "RecordValidationError",
    "CategoryTotal",
    "DashboardSnapshot",
    "Expense",
    "Invoice",
    "LineItem",
    "TransactionView",
    "compute_dashboard_snapshot",
    "snapshot_to_payload",
]
