"""CLI adapter creating the invoice and expense tables.

This adapter is meant for local operations: it instantiates the concrete
database adapter and ensures the schema exists before the dashboard or
the CRUD use cases touch the database.
"""

from finance_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.records_schema import ensure_schema


def main() -> None:
    """Create the finance tables on the configured database."""
    logger = get_app_logger()
    adapter = SqlAlchemyDatabaseEngineAdapter()

    engine = adapter.get_engine()
    logger.info(f"Finance DB: {engine.url}")
    ensure_schema(adapter, logger=logger)

    print("Invoices and expenses tables are ready.")


if __name__ == "__main__":  # pragma: no cover
    main()
