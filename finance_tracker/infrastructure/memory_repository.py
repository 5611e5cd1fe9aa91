"""In-memory record store for demos and tests."""

from collections.abc import Iterable

from finance_tracker.application.ports.records_repository import (
    ExpenseRepositoryPort,
    InvoiceRepositoryPort,
)
from finance_tracker.domain.errors import RecordNotFoundError
from finance_tracker.domain.models import Expense, Invoice


class InMemoryRecordStore(InvoiceRepositoryPort, ExpenseRepositoryPort):
    """Record store keeping invoices and expenses in dictionaries.

    Listing returns records newest first; records sharing a date keep
    insertion order.
    """

    def __init__(
        self,
        invoices: Iterable[Invoice] = (),
        expenses: Iterable[Expense] = (),
    ) -> None:
        self._invoices: dict[str, Invoice] = {
            invoice.id: invoice for invoice in invoices
        }
        self._expenses: dict[str, Expense] = {
            expense.id: expense for expense in expenses
        }

    def list_all_invoices(self) -> list[Invoice]:
        return sorted(
            self._invoices.values(),
            key=lambda invoice: invoice.date,
            reverse=True,
        )

    def get_invoice(self, invoice_id: str) -> Invoice:
        try:
            return self._invoices[invoice_id]
        except KeyError as exc:
            raise RecordNotFoundError("Invoice", invoice_id) from exc

    def add_invoice(self, invoice: Invoice) -> Invoice:
        self._invoices[invoice.id] = invoice
        return invoice

    def update_invoice(self, invoice: Invoice) -> Invoice:
        if invoice.id not in self._invoices:
            raise RecordNotFoundError("Invoice", invoice.id)
        self._invoices[invoice.id] = invoice
        return invoice

    def delete_invoice(self, invoice_id: str) -> None:
        if self._invoices.pop(invoice_id, None) is None:
            raise RecordNotFoundError("Invoice", invoice_id)

    def list_all_expenses(self) -> list[Expense]:
        return sorted(
            self._expenses.values(),
            key=lambda expense: expense.date,
            reverse=True,
        )

    def add_expense(self, expense: Expense) -> Expense:
        self._expenses[expense.id] = expense
        return expense

    def delete_expense(self, expense_id: str) -> None:
        if self._expenses.pop(expense_id, None) is None:
            raise RecordNotFoundError("Expense", expense_id)


__all__ = ["InMemoryRecordStore"]
