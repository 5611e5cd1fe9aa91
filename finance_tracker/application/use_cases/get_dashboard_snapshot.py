"""Use case to compute the dashboard snapshot from the record store."""

from finance_tracker.application.ports.records_repository import (
    ExpenseRepositoryPort,
    InvoiceRepositoryPort,
)
from finance_tracker.domain.models import DashboardSnapshot
from finance_tracker.domain.services.dashboard import (
    compute_dashboard_snapshot,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetDashboardSnapshotUseCase:
    """Compute income, expense and activity figures for the dashboard."""

    def __init__(
        self,
        invoice_repository: InvoiceRepositoryPort,
        expense_repository: ExpenseRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            invoice_repository: Port providing the full invoice set.
            expense_repository: Port providing the full expense set.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._invoice_repository = invoice_repository
        self._expense_repository = expense_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> DashboardSnapshot:
        """Return a freshly computed snapshot.

        Both record sets are read before anything is computed; a
        DataUnavailableError from either read propagates unchanged and no
        partial snapshot is produced.

        Returns:
            DashboardSnapshot: Totals, recent activity and category totals.
        """
        invoices = self._invoice_repository.list_all_invoices()
        expenses = self._expense_repository.list_all_expenses()
        self._logger.info(
            f"Fetched {len(invoices)} invoices and {len(expenses)} expenses"
        )

        snapshot = compute_dashboard_snapshot(invoices, expenses)
        self._logger.info(
            f"Dashboard snapshot computed: income={snapshot.total_income}, "
            f"expenses={snapshot.total_expenses}, balance={snapshot.balance}"
        )
        return snapshot


__all__ = ["GetDashboardSnapshotUseCase", "DashboardSnapshot"]
