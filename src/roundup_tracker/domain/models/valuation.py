"""Domain models produced by the valuation engine."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class ContributionValuation:
    """Valuation detail for a single contribution.

    Attributes:
        amount: Contribution principal.
        occurred_at: Instant of the contribution.
        days_held: Whole days between the contribution and the valuation.
        growth: Capped simple-interest growth.
        current_value: Principal plus growth.
        daily_rate: Annual rate divided by 365.
    """

    amount: Decimal
    occurred_at: datetime
    days_held: int
    growth: Decimal
    current_value: Decimal
    daily_rate: Decimal


@dataclass(frozen=True)
class ValuationResult:
    """Aggregate time-weighted valuation of a contribution set.

    ``total_current_value`` always equals ``total_principal + total_growth``.
    """

    total_principal: Decimal
    total_growth: Decimal
    total_current_value: Decimal
    overall_growth_rate_percent: Decimal
    annual_rate: Decimal
    daily_rate: Decimal
    as_of: datetime
    details: list[ContributionValuation] = field(default_factory=list)

    @property
    def contribution_count(self) -> int:
        """Return the number of valued contributions."""
        return len(self.details)


@dataclass(frozen=True)
class PeriodWindow:
    """Look-back window resolved from a period token."""

    token: str
    days: int
    step_days: int


@dataclass(frozen=True)
class HistoryPoint:
    """Portfolio valuation sampled at one instant."""

    date: date
    total_balance: Decimal
    contributions: Decimal
    growth: Decimal
    growth_rate_percent: Decimal
    amount_added_on_date: Decimal
    contribution_count: int


@dataclass(frozen=True)
class PeriodGrowthResult:
    """Growth decomposition over a look-back window.

    Attributes:
        period: Period token that was analysed.
        added_this_period: Principal contributed inside the window.
        growth_this_period: Growth earned by principal that predates the
            window.
        growth_rate_percent: Growth relative to the pre-existing balance.
        current_balance: Value of every contribution at the window end.
        period_start: Window start instant.
        period_end: Window end instant.
        existing_count: Contributions made before the window.
        new_count: Contributions made inside the window.
        period_start_balance: Value of pre-existing principal at the start.
        period_start_growth: Growth of pre-existing principal at the start.
        existing_current_growth: Growth of pre-existing principal at the end.
    """

    period: str
    added_this_period: Decimal
    growth_this_period: Decimal
    growth_rate_percent: Decimal
    current_balance: Decimal
    period_start: datetime
    period_end: datetime
    existing_count: int = 0
    new_count: int = 0
    period_start_balance: Decimal = Decimal("0")
    period_start_growth: Decimal = Decimal("0")
    existing_current_growth: Decimal = Decimal("0")


__all__ = [
    "ContributionValuation",
    "ValuationResult",
    "PeriodWindow",
    "HistoryPoint",
    "PeriodGrowthResult",
]
