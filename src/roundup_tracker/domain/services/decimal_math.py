"""Exact base-10 arithmetic shared by the growth engine.

Every engine entry point runs under ``ARITHMETIC_CONTEXT`` through
``arithmetic_context()`` so results never depend on the caller's
thread-local decimal context. Interim values are kept at
``INTERNAL_QUANTUM`` (10 fractional digits); only externally visible values
are rounded to currency or percent scale.
"""

from contextlib import AbstractContextManager
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_CEILING,
    ROUND_FLOOR,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    localcontext,
)

ARITHMETIC_CONTEXT = Context(
    prec=34,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

INTERNAL_QUANTUM = Decimal("1E-10")
CURRENCY_QUANTUM = Decimal("0.01")
PERCENT_QUANTUM = Decimal("0.01")

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")


def arithmetic_context() -> AbstractContextManager[Context]:
    """Return a context manager activating a copy of the engine context."""
    return localcontext(ARITHMETIC_CONTEXT)


def divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Divide two decimals, refusing a zero divisor.

    Args:
        numerator: Dividend.
        denominator: Divisor.

    Returns:
        Decimal: Quotient at engine precision.

    Raises:
        DivisionByZero: If the divisor is zero. Callers expecting a zero
            divisor must branch before dividing (or use ``safe_ratio``).
    """
    if denominator == 0:
        raise DivisionByZero(f"Division of {numerator} by zero")
    return ARITHMETIC_CONTEXT.divide(numerator, denominator)


def safe_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Return numerator / denominator, or zero when the denominator is zero."""
    if denominator == 0:
        return ZERO
    return divide(numerator, denominator)


def percent_of(part: Decimal, whole: Decimal) -> Decimal:
    """Return ``part`` as a percentage of ``whole`` (zero for an empty whole)."""
    return ARITHMETIC_CONTEXT.multiply(safe_ratio(part, whole), HUNDRED)


def power(base: Decimal, exponent: Decimal | int) -> Decimal:
    """Raise ``base`` to ``exponent``; fractional exponents need base >= 0."""
    return ARITHMETIC_CONTEXT.power(base, Decimal(exponent))


def natural_log(value: Decimal) -> Decimal:
    """Return the natural logarithm of a positive decimal."""
    return ARITHMETIC_CONTEXT.ln(value)


def floor_decimal(value: Decimal) -> Decimal:
    """Round towards negative infinity to an integral value."""
    return value.to_integral_value(rounding=ROUND_FLOOR)


def ceil_decimal(value: Decimal) -> Decimal:
    """Round towards positive infinity to an integral value."""
    return value.to_integral_value(rounding=ROUND_CEILING)


def to_internal(value: Decimal) -> Decimal:
    """Quantize to the internal scale used between engine steps."""
    return value.quantize(
        INTERNAL_QUANTUM,
        rounding=ROUND_HALF_UP,
        context=ARITHMETIC_CONTEXT,
    )


def to_currency(value: Decimal) -> Decimal:
    """Quantize to exactly two decimal places (half-up)."""
    return value.quantize(
        CURRENCY_QUANTUM,
        rounding=ROUND_HALF_UP,
        context=ARITHMETIC_CONTEXT,
    )


def to_percent(value: Decimal) -> Decimal:
    """Quantize a percentage to the uniform percent scale."""
    return value.quantize(
        PERCENT_QUANTUM,
        rounding=ROUND_HALF_UP,
        context=ARITHMETIC_CONTEXT,
    )


def format_currency(value: Decimal) -> str:
    """Render a currency amount as a fixed two-decimal string."""
    return format(to_currency(value), "f")


def format_percent(value: Decimal) -> str:
    """Render a percentage as a fixed two-decimal string."""
    return format(to_percent(value), "f")


__all__ = [
    "ARITHMETIC_CONTEXT",
    "INTERNAL_QUANTUM",
    "CURRENCY_QUANTUM",
    "PERCENT_QUANTUM",
    "ZERO",
    "ONE",
    "HUNDRED",
    "arithmetic_context",
    "divide",
    "safe_ratio",
    "percent_of",
    "power",
    "natural_log",
    "floor_decimal",
    "ceil_decimal",
    "to_internal",
    "to_currency",
    "to_percent",
    "format_currency",
    "format_percent",
]
