"""Helpers for date and timestamp normalization."""

from datetime import date, datetime


def _to_naive_local(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def coerce_datetime(value) -> datetime:
    """Normalize a timestamp value read from storage or user input.

    Records carry naive local timestamps, the same convention as
    ``datetime.now()`` and the rows SQLite returns. Aware values are
    converted to local time and stripped of their offset so that every
    timestamp in a feed stays comparable.

    Args:
        value: datetime, date, or ISO-8601 string.

    Returns:
        datetime: Naive local datetime.

    Raises:
        ValueError: If the value cannot be interpreted as a timestamp.
    """
    if isinstance(value, datetime):
        return _to_naive_local(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        return _to_naive_local(datetime.fromisoformat(value.strip()))
    raise ValueError(f"Unsupported timestamp value: {value!r}")


def coerce_optional_date(value) -> date | None:
    """Normalize an optional calendar date.

    Args:
        value: None, date, datetime, or ISO-8601 string.

    Returns:
        date | None: Calendar date, or None when missing.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(str(value).strip()).date()


__all__ = ["coerce_datetime", "coerce_optional_date"]
