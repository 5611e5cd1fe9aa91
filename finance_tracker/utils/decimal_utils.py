"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize a money or quantity value to a finite Decimal.

    None is read as zero. Strings are stripped before parsing.

    Args:
        value: Raw numeric value from SQL, JSON or user input.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value is not numeric, or is NaN or infinite.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Not a decimal value: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Decimal value must be finite: {value!r}")
    return result


__all__ = ["coerce_decimal"]
