"""Domain models for the dashboard snapshot."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from finance_tracker.domain.constants import TransactionKind


@dataclass(frozen=True)
class TransactionView:
    """Normalized entry of the recent-activity feed."""

    id: str
    date: datetime
    amount: Decimal
    kind: TransactionKind
    label: str


@dataclass(frozen=True)
class CategoryTotal:
    """Summed expense amount for a single category."""

    name: str
    value: Decimal


@dataclass(frozen=True)
class DashboardSnapshot:
    """Point-in-time aggregation of invoices and expenses.

    Attributes:
        total_income: Sum of PAID invoice amounts.
        total_expenses: Sum of all expense amounts.
        balance: total_income minus total_expenses.
        recent_transactions: At most five entries, newest first.
        expense_chart_data: One total per distinct expense category.
    """

    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal
    recent_transactions: tuple[TransactionView, ...]
    expense_chart_data: tuple[CategoryTotal, ...]


__all__ = ["TransactionView", "CategoryTotal", "DashboardSnapshot"]
