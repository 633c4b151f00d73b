"""Round-up (spare change) calculations."""

import logging
from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from roundup_tracker.domain.constants import DEFAULT_ROUND_UP_UNIT
from roundup_tracker.domain.errors import InvalidAmount
from roundup_tracker.domain.models import RoundUpBatch, RoundUpItem
from roundup_tracker.domain.services.decimal_math import (
    ONE,
    ZERO,
    arithmetic_context,
    divide,
    floor_decimal,
    to_currency,
)
from roundup_tracker.domain.services.validation import (
    parse_non_negative_amount,
    parse_positive_amount,
)


def compute_round_up(amount, unit=DEFAULT_ROUND_UP_UNIT) -> Decimal:
    """Return the spare change needed to reach the next rounding unit.

    An amount that is already a multiple of ``unit`` rounds up a full unit,
    so the result is never zero (``5.00`` gives ``1.00``).

    Args:
        amount: Positive transaction amount.
        unit: Positive rounding unit (default: one currency unit).

    Returns:
        Decimal: Round-up amount with exactly two decimal places.

    Raises:
        InvalidAmount: If the amount or unit is non-numeric, zero, or
            negative.
    """
    with arithmetic_context():
        value = parse_positive_amount(amount)
        step = parse_positive_amount(unit, label="round-up unit")
        next_unit = (floor_decimal(divide(value, step)) + ONE) * step
        return to_currency(next_unit - value)


def process_transaction_round_ups(
    amounts: Iterable,
    unit=DEFAULT_ROUND_UP_UNIT,
    logger: Logger | None = None,
) -> RoundUpBatch:
    """Compute round-ups for a batch of transaction amounts.

    Invalid amounts are logged and skipped so one bad row does not abort
    the batch.

    Args:
        amounts: Raw transaction amounts.
        unit: Rounding unit applied to every amount.
        logger: Logger used for warnings about skipped rows.

    Returns:
        RoundUpBatch: Per-transaction round-ups and their exact total.
    """
    log = logger or logging.getLogger(__name__)
    items: list[RoundUpItem] = []
    skipped = 0
    total = ZERO
    for index, raw_amount in enumerate(amounts):
        try:
            round_up = compute_round_up(raw_amount, unit)
        except InvalidAmount as exc:
            skipped += 1
            log.warning(f"Skipping transaction #{index}: {exc}")
            continue
        original = to_currency(parse_positive_amount(raw_amount))
        items.append(
            RoundUpItem(
                original_amount=original,
                round_up=round_up,
                rounded_amount=original + round_up,
            )
        )
        total += round_up

    return RoundUpBatch(
        total_round_ups=to_currency(total),
        processed_count=len(items),
        skipped_count=skipped,
        items=items,
    )


def validate_amount(value) -> Decimal:
    """Validate a monetary amount and return it at currency scale.

    Zero is accepted; negative and non-numeric values are not.

    Raises:
        InvalidAmount: If the value is negative or non-numeric.
    """
    return to_currency(parse_non_negative_amount(value))


__all__ = [
    "compute_round_up",
    "process_transaction_round_ups",
    "validate_amount",
]
