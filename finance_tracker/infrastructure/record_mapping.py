"""Conversions between stored rows and domain records."""

import json
from typing import Any

from finance_tracker.domain.models import Expense, Invoice, LineItem
from finance_tracker.domain.services.normalization import (
    normalize_interval,
    normalize_status,
)
from finance_tracker.utils.date_utils import (
    coerce_datetime,
    coerce_optional_date,
)
from finance_tracker.utils.decimal_utils import coerce_decimal


def encode_line_items(items: tuple[LineItem, ...] | None) -> str | None:
    """Serialize line items to the JSON text stored in invoices.items.

    Legacy invoices (None) are stored as NULL.
    """
    if items is None:
        return None
    return json.dumps(
        [
            {
                "description": item.description,
                "quantity": str(item.quantity),
                "price": str(item.price),
            }
            for item in items
        ]
    )


def _line_item_from_entry(entry) -> LineItem:
    if not isinstance(entry, dict):
        raise ValueError(f"Line item must be an object: {entry!r}")
    return LineItem(
        description=str(entry.get("description") or ""),
        quantity=coerce_decimal(entry.get("quantity")),
        price=coerce_decimal(entry.get("price")),
    )


def decode_line_items(raw, logger=None) -> tuple[LineItem, ...] | None:
    """Parse the stored items column.

    Anything that is not a JSON list of line-item objects with numeric
    quantity and price is read as a legacy invoice and logged.

    Args:
        raw: NULL, JSON text, or an already decoded list.
        logger: Optional logger used when the column cannot be parsed.

    Returns:
        tuple[LineItem, ...] | None: Line items, or None for legacy rows.
    """
    if raw is None:
        return None
    try:
        payload = json.loads(raw) if isinstance(raw, str) else raw
        if payload is None:
            return None
        if not isinstance(payload, list):
            raise ValueError(f"Expected a list, got {type(payload).__name__}")
        return tuple(_line_item_from_entry(entry) for entry in payload)
    except (TypeError, ValueError) as exc:
        if logger is not None:
            logger.warning(
                f"Unreadable invoice items; treating as legacy: {exc}"
            )
        return None


def invoice_from_row(row, logger=None) -> Invoice:
    """Build an Invoice from a result row exposing column attributes.

    Raises:
        ValueError: If amount, status, dates or interval cannot be read.
    """
    return Invoice(
        id=row.id,
        client_name=row.client_name,
        client_email=row.client_email,
        amount=coerce_decimal(row.amount),
        status=normalize_status(row.status),
        date=coerce_datetime(row.date),
        due_date=coerce_optional_date(row.due_date),
        is_recurring=bool(row.is_recurring),
        recurring_interval=normalize_interval(row.recurring_interval),
        line_items=decode_line_items(row.items, logger),
    )


def invoice_to_params(invoice: Invoice) -> dict[str, Any]:
    return {
        "id": invoice.id,
        "client_name": invoice.client_name,
        "client_email": invoice.client_email,
        "amount": invoice.amount,
        "status": invoice.status.value,
        "date": invoice.date,
        "due_date": invoice.due_date,
        "is_recurring": invoice.is_recurring,
        "recurring_interval": (
            invoice.recurring_interval.value
            if invoice.recurring_interval is not None
            else None
        ),
        "items": encode_line_items(invoice.line_items),
    }


def expense_from_row(row) -> Expense:
    """Build an Expense from a result row exposing column attributes."""
    return Expense(
        id=row.id,
        category=row.category,
        amount=coerce_decimal(row.amount),
        date=coerce_datetime(row.date),
        description=row.description,
    )


def expense_to_params(expense: Expense) -> dict[str, Any]:
    return {
        "id": expense.id,
        "category": expense.category,
        "amount": expense.amount,
        "date": expense.date,
        "description": expense.description,
    }


__all__ = [
    "encode_line_items",
    "decode_line_items",
    "invoice_from_row",
    "invoice_to_params",
    "expense_from_row",
    "expense_to_params",
]
