"""Domain normalization helpers."""

from finance_tracker.domain.constants import InvoiceStatus, RecurringInterval
from finance_tracker.domain.errors import RecordValidationError


def normalize_status(status: str | InvoiceStatus) -> InvoiceStatus:
    """Normalize an invoice status value.

    Args:
        status: Raw status value from input or storage.

    Returns:
        InvoiceStatus: Matching status member.

    Raises:
        RecordValidationError: If the status is unknown.
    """
    if isinstance(status, InvoiceStatus):
        return status
    cleaned = str(status).strip().upper()
    try:
        return InvoiceStatus(cleaned)
    except ValueError as exc:
        raise RecordValidationError(
            f"Unknown invoice status: {status!r}"
        ) from exc


def normalize_interval(
    interval: str | RecurringInterval | None,
) -> RecurringInterval | None:
    """Normalize a recurring interval value.

    Args:
        interval: Raw interval value, or None.

    Returns:
        RecurringInterval | None: Matching interval member.

    Raises:
        RecordValidationError: If the interval is unknown.
    """
    if interval is None or isinstance(interval, RecurringInterval):
        return interval
    cleaned = str(interval).strip().upper()
    if not cleaned:
        return None
    try:
        return RecurringInterval(cleaned)
    except ValueError as exc:
        raise RecordValidationError(
            f"Unknown recurring interval: {interval!r}"
        ) from exc


__all__ = ["normalize_status", "normalize_interval"]
