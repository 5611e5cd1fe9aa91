"""Write-path validation for invoices and expenses."""

from decimal import Decimal

from finance_tracker.domain.errors import RecordValidationError
from finance_tracker.domain.models import Expense, Invoice
from finance_tracker.utils.decimal_utils import coerce_decimal


def parse_amount(value, field: str = "amount") -> Decimal:
    """Convert user input to a finite Decimal.

    Raises:
        RecordValidationError: If the value is not a finite number.
    """
    try:
        return coerce_decimal(value)
    except ValueError as exc:
        raise RecordValidationError(f"Invalid {field}: {value!r}") from exc


def _require_finite(value: Decimal, label: str) -> None:
    if not value.is_finite():
        raise RecordValidationError(f"{label} must be a finite number")


def validate_invoice(invoice: Invoice) -> None:
    """Reject invoices that must not reach the store.

    Args:
        invoice: Candidate invoice.

    Raises:
        RecordValidationError: On an empty client name, a negative amount,
            negative line values, or an interval on a one-off invoice.
    """
    if not invoice.client_name or not invoice.client_name.strip():
        raise RecordValidationError("Invoice client name is required")
    _require_finite(invoice.amount, "Invoice amount")
    if invoice.amount < 0:
        raise RecordValidationError(
            f"Invoice amount must be non-negative: {invoice.amount}"
        )
    for index, item in enumerate(invoice.line_items or ()):
        _require_finite(item.quantity, f"Line item {index} quantity")
        _require_finite(item.price, f"Line item {index} price")
        if item.quantity < 0 or item.price < 0:
            raise RecordValidationError(
                f"Line item {index} has a negative quantity or price"
            )
    if invoice.recurring_interval is not None and not invoice.is_recurring:
        raise RecordValidationError(
            "Recurring interval set on a non-recurring invoice"
        )


def validate_expense(expense: Expense) -> None:
    """Reject expenses that must not reach the store.

    Raises:
        RecordValidationError: On an empty category or a negative amount.
    """
    if not expense.category or not expense.category.strip():
        raise RecordValidationError("Expense category is required")
    _require_finite(expense.amount, "Expense amount")
    if expense.amount < Decimal("0"):
        raise RecordValidationError(
            f"Expense amount must be non-negative: {expense.amount}"
        )


__all__ = ["parse_amount", "validate_invoice", "validate_expense"]
