"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from finance_tracker.infrastructure.logging.logger import get_app_logger


SUPPORTED_BACKENDS = ("sqlalchemy", "memory")


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for selecting the record store and display currency.

    Attributes:
        backend: Record store identifier (sqlalchemy or memory).
        currency_code: ISO currency code used when formatting amounts.
    """

    backend: str = "sqlalchemy"
    currency_code: str = "USD"

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = os.getenv("FINANCE_BACKEND", "sqlalchemy").strip().lower()
        currency_code = (
            os.getenv("FINANCE_CURRENCY", "USD").strip().upper() or "USD"
        )
        if backend not in SUPPORTED_BACKENDS:
            get_app_logger().warning(
                f"Unknown FINANCE_BACKEND={backend}; "
                f"expected one of {', '.join(SUPPORTED_BACKENDS)}"
            )
        return cls(backend=backend, currency_code=currency_code)


__all__ = ["FinanceSettings", "SUPPORTED_BACKENDS"]
