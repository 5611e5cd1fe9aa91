"""Domain services package."""

from .dashboard import (
    compute_dashboard_snapshot,
    compute_total_expenses,
    compute_total_income,
    expense_to_transaction,
    group_expenses_by_category,
    invoice_to_transaction,
    merge_recent_transactions,
)
from .normalization import normalize_interval, normalize_status
from .payload import snapshot_to_payload
from .validation import parse_amount, validate_expense, validate_invoice

__all__ = [
    "compute_dashboard_snapshot",
    "compute_total_expenses",
    "compute_total_income",
    "expense_to_transaction",
    "group_expenses_by_category",
    "invoice_to_transaction",
    "merge_recent_transactions",
    "normalize_interval",
    "normalize_status",
    "parse_amount",
    "snapshot_to_payload",
    "validate_expense",
    "validate_invoice",
]
