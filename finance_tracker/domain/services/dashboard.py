"""Domain services computing the dashboard snapshot.

Every function here is pure: inputs are read, never mutated, and the
result depends only on the arguments.
"""

from collections.abc import Sequence
from decimal import Decimal

from finance_tracker.domain.constants import (
    RECENT_TRANSACTIONS_LIMIT,
    InvoiceStatus,
    TransactionKind,
)
from finance_tracker.domain.models import (
    CategoryTotal,
    DashboardSnapshot,
    Expense,
    Invoice,
    TransactionView,
)


def compute_total_income(invoices: Sequence[Invoice]) -> Decimal:
    """Return the sum of amounts over PAID invoices.

    Args:
        invoices: Every invoice in the store.

    Returns:
        Decimal: Realized income.
    """
    return sum(
        (
            invoice.amount
            for invoice in invoices
            if invoice.status == InvoiceStatus.PAID
        ),
        Decimal("0"),
    )


def compute_total_expenses(expenses: Sequence[Expense]) -> Decimal:
    """Return the sum of amounts over all expenses."""
    return sum((expense.amount for expense in expenses), Decimal("0"))


def invoice_to_transaction(invoice: Invoice) -> TransactionView:
    return TransactionView(
        id=invoice.id,
        date=invoice.date,
        amount=invoice.amount,
        kind=TransactionKind.INCOME,
        label=f"Invoice for {invoice.client_name}",
    )


def expense_to_transaction(expense: Expense) -> TransactionView:
    return TransactionView(
        id=expense.id,
        date=expense.date,
        amount=expense.amount,
        kind=TransactionKind.EXPENSE,
        label=expense.category,
    )


def merge_recent_transactions(
    invoices: Sequence[Invoice],
    expenses: Sequence[Expense],
    limit: int = RECENT_TRANSACTIONS_LIMIT,
) -> list[TransactionView]:
    """Return the newest invoices and expenses merged into one feed.

    The newest ``limit`` records of each kind are taken independently
    (invoice status is ignored), concatenated invoices first, then sorted
    by date descending. The sort is stable, so on equal dates an invoice
    precedes an expense and records of the same kind keep their input
    order.

    Args:
        invoices: Every invoice in the store.
        expenses: Every expense in the store.
        limit: Maximum feed length and per-kind candidate count.

    Returns:
        list[TransactionView]: At most ``limit`` entries, newest first.
    """
    recent_invoices = sorted(
        invoices,
        key=lambda invoice: invoice.date,
        reverse=True,
    )[:limit]
    recent_expenses = sorted(
        expenses,
        key=lambda expense: expense.date,
        reverse=True,
    )[:limit]
    merged = [
        *(invoice_to_transaction(invoice) for invoice in recent_invoices),
        *(expense_to_transaction(expense) for expense in recent_expenses),
    ]
    merged.sort(key=lambda view: view.date, reverse=True)
    return merged[:limit]


def group_expenses_by_category(
    expenses: Sequence[Expense],
) -> list[CategoryTotal]:
    """Sum expense amounts per category.

    Categories are matched exactly (case-sensitive, untrimmed). Totals are
    emitted in first-seen order.

    Args:
        expenses: Every expense in the store.

    Returns:
        list[CategoryTotal]: One total per distinct category.
    """
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        totals[expense.category] = (
            totals.get(expense.category, Decimal("0")) + expense.amount
        )
    return [
        CategoryTotal(name=category, value=value)
        for category, value in totals.items()
    ]


def compute_dashboard_snapshot(
    invoices: Sequence[Invoice],
    expenses: Sequence[Expense],
) -> DashboardSnapshot:
    """Compute totals, recent activity and category breakdown.

    Args:
        invoices: The complete, unfiltered invoice set.
        expenses: The complete, unfiltered expense set.

    Returns:
        DashboardSnapshot: Aggregated dashboard figures.
    """
    total_income = compute_total_income(invoices)
    total_expenses = compute_total_expenses(expenses)
    return DashboardSnapshot(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
        recent_transactions=tuple(
            merge_recent_transactions(invoices, expenses)
        ),
        expense_chart_data=tuple(group_expenses_by_category(expenses)),
    )


__all__ = [
    "compute_total_income",
    "compute_total_expenses",
    "invoice_to_transaction",
    "expense_to_transaction",
    "merge_recent_transactions",
    "group_expenses_by_category",
    "compute_dashboard_snapshot",
]
