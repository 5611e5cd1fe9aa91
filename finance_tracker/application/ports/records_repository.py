"""Ports for reading and writing invoice and expense records."""

from typing import Protocol

from finance_tracker.domain.models import Expense, Invoice


class InvoiceRepositoryPort(Protocol):
    """Port exposing the invoice side of the record store.

    Read methods raise DataUnavailableError when the store cannot be
    reached; lookups by id raise RecordNotFoundError.
    """

    def list_all_invoices(self) -> list[Invoice]:
        """Return every invoice, newest first, without filtering."""

    def get_invoice(self, invoice_id: str) -> Invoice:
        """Return a single invoice by id."""

    def add_invoice(self, invoice: Invoice) -> Invoice:
        """Persist a new invoice and return it."""

    def update_invoice(self, invoice: Invoice) -> Invoice:
        """Replace a stored invoice and return it."""

    def delete_invoice(self, invoice_id: str) -> None:
        """Remove an invoice by id."""


class ExpenseRepositoryPort(Protocol):
    """Port exposing the expense side of the record store."""

    def list_all_expenses(self) -> list[Expense]:
        """Return every expense, newest first, without filtering."""

    def add_expense(self, expense: Expense) -> Expense:
        """Persist a new expense and return it."""

    def delete_expense(self, expense_id: str) -> None:
        """Remove an expense by id."""


__all__ = ["InvoiceRepositoryPort", "ExpenseRepositoryPort"]
