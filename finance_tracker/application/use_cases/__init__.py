"""Application use cases package."""

from .get_dashboard_snapshot import GetDashboardSnapshotUseCase
from .manage_expenses import (
    CreateExpenseUseCase,
    DeleteExpenseUseCase,
    ListExpensesUseCase,
)
from .manage_invoices import (
    CreateInvoiceUseCase,
    DeleteInvoiceUseCase,
    GetInvoiceUseCase,
    ListInvoicesUseCase,
    UpdateInvoiceUseCase,
)

__all__ = [
    "GetDashboardSnapshotUseCase",
    "CreateExpenseUseCase",
    "DeleteExpenseUseCase",
    "ListExpensesUseCase",
    "CreateInvoiceUseCase",
    "DeleteInvoiceUseCase",
    "GetInvoiceUseCase",
    "ListInvoicesUseCase",
    "UpdateInvoiceUseCase",
]
