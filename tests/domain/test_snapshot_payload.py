"""Tests for the snapshot JSON contract."""

import json
from datetime import datetime
from decimal import Decimal

from finance_tracker.domain.constants import InvoiceStatus
from finance_tracker.domain.models import Expense, Invoice
from finance_tracker.domain.services.dashboard import (
    compute_dashboard_snapshot,
)
from finance_tracker.domain.services.payload import snapshot_to_payload


def test_payload_uses_client_field_names() -> None:
    invoices = [
        Invoice(
            id="inv-1",
            client_name="Acme",
            amount=Decimal("1000.50"),
            status=InvoiceStatus.PAID,
            date=datetime(2024, 1, 10),
        )
    ]
    expenses = [
        Expense(
            id="exp-1",
            category="Office",
            amount=Decimal("200.25"),
            date=datetime(2024, 1, 12, 8, 30),
        )
    ]

    payload = snapshot_to_payload(
        compute_dashboard_snapshot(invoices, expenses)
    )

    assert payload["totalIncome"] == 1000.5
    assert payload["totalExpenses"] == 200.25
    assert payload["balance"] == 800.25
    assert payload["recentTransactions"] == [
        {
            "id": "exp-1",
            "date": "2024-01-12T08:30:00",
            "amount": 200.25,
            "type": "EXPENSE",
            "description": "Office",
        },
        {
            "id": "inv-1",
            "date": "2024-01-10T00:00:00",
            "amount": 1000.5,
            "type": "INCOME",
            "description": "Invoice for Acme",
        },
    ]
    assert payload["expenseChartData"] == [{"name": "Office", "value": 200.25}]
    json.dumps(payload)


def test_empty_payload() -> None:
    payload = snapshot_to_payload(compute_dashboard_snapshot([], []))

    assert payload == {
        "totalIncome": 0.0,
        "totalExpenses": 0.0,
        "balance": 0.0,
        "recentTransactions": [],
        "expenseChartData": [],
    }
