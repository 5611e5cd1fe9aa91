"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from finance_tracker.application.use_cases.manage_expenses import (
    ListExpensesUseCase,
)
from finance_tracker.application.use_cases.manage_invoices import (
    ListInvoicesUseCase,
)
from finance_tracker.domain.constants import TransactionKind
from finance_tracker.domain.errors import DataUnavailableError
from finance_tracker.domain.models import DashboardSnapshot, Expense, Invoice
from finance_tracker.infrastructure.container import (
    build_dashboard_snapshot_use_case,
    build_expense_repository,
    build_invoice_repository,
)
from finance_tracker.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from finance_tracker.infrastructure.settings import FinanceSettings


INCOME_COLOR = "#10B981"
EXPENSE_COLOR = "#EF4444"
CATEGORY_PALETTE = (
    "#0088FE",
    "#00C49F",
    "#FFBB28",
    "#FF8042",
    "#8884d8",
)
_CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£"}


def _fetch_dashboard_snapshot() -> DashboardSnapshot:
    """Recompute the snapshot from the configured record store."""
    use_case = build_dashboard_snapshot_use_case()
    return use_case.execute()


def _fetch_invoices() -> Sequence[Invoice]:
    use_case = ListInvoicesUseCase(build_invoice_repository())
    return use_case.execute()


def _fetch_expenses() -> Sequence[Expense]:
    use_case = ListExpensesUseCase(build_expense_repository())
    return use_case.execute()


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = _CURRENCY_SYMBOLS.get(currency_code)
    if symbol is None:
        return f"{value:,.2f} {currency_code}"
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def _prepare_comparison_chart_data(
    snapshot: DashboardSnapshot,
) -> list[dict[str, str | float]]:
    """Return bar chart rows comparing income and expenses."""
    return [
        {
            "name": "Income",
            "value": float(snapshot.total_income),
            "color": INCOME_COLOR,
        },
        {
            "name": "Expenses",
            "value": float(snapshot.total_expenses),
            "color": EXPENSE_COLOR,
        },
    ]


def _prepare_category_chart_data(
    snapshot: DashboardSnapshot,
    currency_code: str,
) -> list[dict[str, str | float]]:
    """Prepare donut chart rows, largest category first.

    Args:
        snapshot: Computed dashboard snapshot.
        currency_code: Currency used for tooltip labels.

    Returns:
        Altair-ready rows with amount and share labels.
    """
    items = sorted(
        snapshot.expense_chart_data,
        key=lambda item: item.value,
        reverse=True,
    )
    total = snapshot.total_expenses
    data: list[dict[str, str | float]] = []
    for item in items:
        share = (
            (item.value / total) * Decimal("100")
            if total
            else Decimal("0")
        )
        data.append(
            {
                "category": item.name,
                "amount": float(item.value),
                "amount_label": _format_currency(item.value, currency_code),
                "share_label": f"{share:.0f}%",
            }
        )
    return data


def _prepare_recent_rows(
    snapshot: DashboardSnapshot,
    currency_code: str,
) -> list[dict[str, str]]:
    """Return table rows for the recent-activity feed."""
    rows = []
    for view in snapshot.recent_transactions:
        sign = "+" if view.kind == TransactionKind.INCOME else "-"
        rows.append(
            {
                "Date": view.date.strftime("%Y-%m-%d"),
                "Description": view.label,
                "Amount": f"{sign}{_format_currency(view.amount, currency_code)}",
            }
        )
    return rows


def _prepare_invoice_rows(
    invoices: Sequence[Invoice],
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {
            "Client": invoice.client_name,
            "Date": invoice.date.strftime("%Y-%m-%d"),
            "Due": (
                invoice.due_date.isoformat() if invoice.due_date else "-"
            ),
            "Amount": _format_currency(invoice.amount, currency_code),
            "Status": invoice.status.value,
            "Recurring": (
                invoice.recurring_interval.value
                if invoice.is_recurring and invoice.recurring_interval
                else "-"
            ),
            "Items": (
                "legacy"
                if invoice.is_legacy
                else str(len(invoice.line_items))
            ),
        }
        for invoice in invoices
    ]


def _prepare_expense_rows(
    expenses: Sequence[Expense],
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {
            "Category": expense.category,
            "Date": expense.date.strftime("%Y-%m-%d"),
            "Amount": _format_currency(expense.amount, currency_code),
            "Description": expense.description or "-",
        }
        for expense in expenses
    ]


def _render_comparison_chart(snapshot: DashboardSnapshot) -> None:
    st.subheader("Income vs Expenses")
    data = _prepare_comparison_chart_data(snapshot)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=6,
        cornerRadiusTopRight=6,
    ).encode(
        x=alt.X("name:N", title=None, sort=None),
        y=alt.Y("value:Q", title=None),
        color=alt.Color("color:N", scale=None, legend=None),
        tooltip=[alt.Tooltip("name:N"), alt.Tooltip("value:Q", format=",.2f")],
    ).properties(height=280)
    st.altair_chart(chart, width="stretch")


def _render_category_chart(
    snapshot: DashboardSnapshot,
    currency_code: str,
    chart_size: int = 280,
) -> None:
    st.subheader("Expense Breakdown")
    if not snapshot.expense_chart_data:
        st.info("No expenses recorded yet.")
        return
    data = _prepare_category_chart_data(snapshot, currency_code)
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.3,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=list(CATEGORY_PALETTE)),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=chart_size, height=chart_size)
    st.altair_chart(chart, width="stretch")


def _render_dashboard(currency_code: str) -> None:
    try:
        snapshot = _fetch_dashboard_snapshot()
    except DataUnavailableError as exc:
        get_app_logger().error(f"Error fetching dashboard stats: {exc}")
        st.error("Failed to fetch dashboard stats.")
        return

    income_col, expenses_col, balance_col = st.columns(3)
    income_col.metric(
        "Total Income",
        _format_currency(snapshot.total_income, currency_code),
    )
    expenses_col.metric(
        "Total Expenses",
        _format_currency(snapshot.total_expenses, currency_code),
    )
    balance_col.metric(
        "Current Balance",
        _format_currency(snapshot.balance, currency_code),
    )

    feed_col, charts_col = st.columns(2)
    with feed_col:
        st.subheader("Recent Transactions")
        rows = _prepare_recent_rows(snapshot, currency_code)
        if rows:
            st.dataframe(rows, width="stretch", hide_index=True)
        else:
            st.caption("No recent transactions")
    with charts_col:
        _render_comparison_chart(snapshot)
        _render_category_chart(snapshot, currency_code)


def _render_invoices(currency_code: str) -> None:
    invoices = _fetch_invoices()
    st.caption(f"{len(invoices)} invoices")
    if not invoices:
        st.warning("No invoices recorded yet.")
        return
    st.dataframe(
        _prepare_invoice_rows(invoices, currency_code),
        width="stretch",
        hide_index=True,
    )


def _render_expenses(currency_code: str) -> None:
    expenses = _fetch_expenses()
    st.caption(f"{len(expenses)} expenses")
    if not expenses:
        st.warning("No expenses recorded yet.")
        return
    st.dataframe(
        _prepare_expense_rows(expenses, currency_code),
        width="stretch",
        hide_index=True,
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Tracker", layout="wide")
    st.title("Finance Tracker")

    currency_code = FinanceSettings.from_env().currency_code
    page = st.sidebar.selectbox("Page", ["Dashboard", "Invoices", "Expenses"])
    get_usage_logger().info(f"Page viewed: {page}")

    if page == "Dashboard":
        _render_dashboard(currency_code)
    elif page == "Invoices":
        _render_invoices(currency_code)
    else:
        _render_expenses(currency_code)


if __name__ == "__main__":  # pragma: no cover
    main()
