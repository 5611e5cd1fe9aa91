"""CLI adapter printing the dashboard snapshot as JSON.

The output follows the payload layout served to dashboard clients
(totalIncome, totalExpenses, balance, recentTransactions,
expenseChartData).
"""

import json
import sys

from finance_tracker.domain.errors import DataUnavailableError
from finance_tracker.domain.services.payload import snapshot_to_payload
from finance_tracker.infrastructure.container import (
    build_dashboard_snapshot_use_case,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Compute the snapshot and print it to stdout."""
    logger = get_app_logger()
    use_case = build_dashboard_snapshot_use_case()

    try:
        snapshot = use_case.execute()
    except DataUnavailableError as exc:
        logger.error(f"Error fetching dashboard stats: {exc}")
        print(
            json.dumps({"error": "Failed to fetch dashboard stats"}),
            file=sys.stderr,
        )
        raise SystemExit(1) from exc

    print(json.dumps(snapshot_to_payload(snapshot), indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
