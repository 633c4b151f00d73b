"""Domain models for forward-looking projections."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ProjectionSet:
    """Projected future values at fixed horizons, in currency scale."""

    year1: Decimal
    year3: Decimal
    year5: Decimal
    year10: Decimal

    def as_dict(self) -> dict[str, Decimal]:
        """Return the projections keyed by horizon label."""
        return {
            "year1": self.year1,
            "year3": self.year3,
            "year5": self.year5,
            "year10": self.year10,
        }


@dataclass(frozen=True)
class CustomProjection:
    """Projection over an arbitrary horizon with its breakdown."""

    time_horizon_years: Decimal
    future_value: Decimal
    total_contributions: Decimal
    total_growth: Decimal
    growth_percent: Decimal
    from_current_balance: Decimal
    from_contributions: Decimal


@dataclass(frozen=True)
class GoalTimeline:
    """Time needed to reach a savings target."""

    target_amount: Decimal
    current_balance: Decimal
    achieved: bool
    remaining_amount: Decimal
    months_to_reach: int | None
    years_to_reach: Decimal | None
    include_interest: bool


@dataclass(frozen=True)
class GoalProgress:
    """Progress towards a named savings goal."""

    name: str
    target_amount: Decimal
    remaining_amount: Decimal
    progress_percent: Decimal
    months_to_reach: int | None
    achieved: bool


__all__ = [
    "ProjectionSet",
    "CustomProjection",
    "GoalTimeline",
    "GoalProgress",
]
