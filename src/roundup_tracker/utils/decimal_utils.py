"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so that ``4.35`` becomes ``Decimal("4.35")``
    instead of its binary expansion.

    Args:
        value: Raw numeric value from SQL, adapters, or callers.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        InvalidOperation: If the value cannot be parsed as a number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidOperation(f"Boolean is not a numeric value: {value}")
    if isinstance(value, str):
        value = value.strip()
    return Decimal(str(value))


__all__ = ["coerce_decimal"]
