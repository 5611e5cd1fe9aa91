"""JSON contract for the dashboard snapshot.

Field names follow the camelCase layout consumed by existing clients:
totalIncome, totalExpenses, balance, recentTransactions and
expenseChartData.
"""

from typing import Any

from finance_tracker.domain.models import (
    CategoryTotal,
    DashboardSnapshot,
    TransactionView,
)


def transaction_to_payload(view: TransactionView) -> dict[str, Any]:
    return {
        "id": view.id,
        "date": view.date.isoformat(),
        "amount": float(view.amount),
        "type": view.kind.value,
        "description": view.label,
    }


def category_total_to_payload(total: CategoryTotal) -> dict[str, Any]:
    return {"name": total.name, "value": float(total.value)}


def snapshot_to_payload(snapshot: DashboardSnapshot) -> dict[str, Any]:
    """Return the snapshot as a JSON-serializable dict.

    Args:
        snapshot: Computed dashboard snapshot.

    Returns:
        dict[str, Any]: Payload with numbers as floats and ISO dates.
    """
    return {
        "totalIncome": float(snapshot.total_income),
        "totalExpenses": float(snapshot.total_expenses),
        "balance": float(snapshot.balance),
        "recentTransactions": [
            transaction_to_payload(view)
            for view in snapshot.recent_transactions
        ],
        "expenseChartData": [
            category_total_to_payload(total)
            for total in snapshot.expense_chart_data
        ],
    }


__all__ = [
    "transaction_to_payload",
    "category_total_to_payload",
    "snapshot_to_payload",
]
