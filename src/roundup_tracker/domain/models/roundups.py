"""Domain models for round-up calculations."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RoundUpItem:
    """Round-up computed for one transaction."""

    original_amount: Decimal
    round_up: Decimal
    rounded_amount: Decimal


@dataclass(frozen=True)
class RoundUpBatch:
    """Round-ups computed for a batch of transactions."""

    total_round_ups: Decimal
    processed_count: int
    skipped_count: int
    items: list[RoundUpItem]


__all__ = ["RoundUpItem", "RoundUpBatch"]
