"""Domain models package."""

from .dashboard import CategoryTotal, DashboardSnapshot, TransactionView
from .records import Expense, Invoice, LineItem

__all__ = [
    "CategoryTotal",
    "DashboardSnapshot",
    "TransactionView",
    "Expense",
    "Invoice",
    "LineItem",
]
