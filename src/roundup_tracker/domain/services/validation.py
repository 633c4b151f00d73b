"""Domain validation helpers for monetary and rate inputs."""

from decimal import Decimal, InvalidOperation

from roundup_tracker.domain.errors import InvalidAmount, InvalidRate
from roundup_tracker.domain.services.decimal_math import ONE, ZERO
from roundup_tracker.utils.decimal_utils import coerce_decimal


def _parse(value, label: str, error: type[ValueError]) -> Decimal:
    if value is None:
        raise error(f"Missing {label}")
    try:
        parsed = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise error(f"Invalid {label}: {value!r}") from exc
    if not parsed.is_finite():
        raise error(f"Invalid {label}: {value!r}")
    return parsed


def parse_positive_amount(value, label: str = "amount") -> Decimal:
    """Parse a strictly positive monetary amount.

    Args:
        value: Raw amount (Decimal, int, float, or numeric string).
        label: Name used in error messages.

    Returns:
        Decimal: Parsed amount.

    Raises:
        InvalidAmount: If the value is non-numeric, zero, or negative.
    """
    amount = _parse(value, label, InvalidAmount)
    if amount <= ZERO:
        raise InvalidAmount(f"{label.capitalize()} must be positive: {value!r}")
    return amount


def parse_non_negative_amount(value, label: str = "amount") -> Decimal:
    """Parse a monetary amount that may be zero.

    Raises:
        InvalidAmount: If the value is non-numeric or negative.
    """
    amount = _parse(value, label, InvalidAmount)
    if amount < ZERO:
        raise InvalidAmount(
            f"{label.capitalize()} must not be negative: {value!r}"
        )
    return amount


def validate_rate(value, label: str = "annual rate") -> Decimal:
    """Parse an annual return rate and check it lies in [0, 1].

    Raises:
        InvalidRate: If the value is non-numeric or out of range.
    """
    rate = _parse(value, label, InvalidRate)
    if rate < ZERO or rate > ONE:
        raise InvalidRate(
            f"{label.capitalize()} must be between 0 and 1: {value!r}"
        )
    return rate


__all__ = [
    "parse_positive_amount",
    "parse_non_negative_amount",
    "validate_rate",
]
