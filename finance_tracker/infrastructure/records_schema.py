"""Relational layout of the invoice and expense tables."""

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.infrastructure.logging.logger import get_app_logger


CREATE_INVOICES_SQL = """
CREATE TABLE IF NOT EXISTS invoices (
    id TEXT PRIMARY KEY,
    client_name TEXT NOT NULL,
    client_email TEXT,
    amount NUMERIC(12, 2) NOT NULL,
    status TEXT NOT NULL DEFAULT 'PENDING',
    date TIMESTAMP NOT NULL,
    due_date DATE,
    is_recurring BOOLEAN NOT NULL DEFAULT FALSE,
    recurring_interval TEXT,
    items TEXT
)
"""

CREATE_EXPENSES_SQL = """
CREATE TABLE IF NOT EXISTS expenses (
    id TEXT PRIMARY KEY,
    category TEXT NOT NULL,
    amount NUMERIC(12, 2) NOT NULL,
    date TIMESTAMP NOT NULL,
    description TEXT
)
"""


def ensure_schema(db_port: DatabaseEnginePort, logger=None) -> None:
    """Create the invoices and expenses tables when missing.

    Args:
        db_port: Port providing access to the finance engine.
        logger: Optional logger compatible with logging.Logger-like API.
    """
    resolved_logger = logger or get_app_logger()
    engine = db_port.get_engine()
    with engine.begin() as conn:
        conn.exec_driver_sql(CREATE_INVOICES_SQL)
        conn.exec_driver_sql(CREATE_EXPENSES_SQL)
    resolved_logger.info("Ensured invoices and expenses tables exist")


__all__ = ["CREATE_INVOICES_SQL", "CREATE_EXPENSES_SQL", "ensure_schema"]
