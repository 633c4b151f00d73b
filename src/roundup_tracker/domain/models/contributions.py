"""Domain models for contribution records and growth profiles."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Contribution:
    """A round-up amount tied to the instant it was invested.

    Attributes:
        amount: Positive contribution amount.
        occurred_at: Timezone-aware instant of the contribution.
    """

    amount: Decimal
    occurred_at: datetime


@dataclass(frozen=True)
class GrowthProfile:
    """Risk tier and its assumed annual return rate."""

    name: str
    annual_return_rate: Decimal
    description: str | None = None


__all__ = ["Contribution", "GrowthProfile"]
