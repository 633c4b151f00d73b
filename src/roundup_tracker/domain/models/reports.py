"""Domain models for wallet reports assembled by use cases."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from .projections import GoalProgress, ProjectionSet
from .valuation import HistoryPoint, PeriodGrowthResult, ValuationResult


@dataclass(frozen=True)
class WalletSummary:
    """Headline wallet figures for a subject."""

    profile_name: str
    annual_return_rate: Decimal
    valuation: ValuationResult
    this_week: Decimal
    this_month: Decimal
    avg_monthly_contribution: Decimal
    monthly_growth: PeriodGrowthResult
    projections: ProjectionSet
    as_of: datetime

    @property
    def total_balance(self) -> Decimal:
        """Return the current wallet value."""
        return self.valuation.total_current_value


@dataclass(frozen=True)
class PortfolioHistoryView:
    """History series with the matching period and overall analysis."""

    period: str
    profile_name: str
    annual_return_rate: Decimal
    history: list[HistoryPoint]
    period_growth: PeriodGrowthResult
    valuation: ValuationResult
    avg_daily_contribution: Decimal


@dataclass(frozen=True)
class ProfileProjection:
    """Projections computed under one growth profile."""

    name: str
    annual_return_rate: Decimal
    description: str | None
    projections: ProjectionSet


@dataclass(frozen=True)
class ProjectionsView:
    """Current-profile projections and the profile comparison."""

    profile_name: str
    annual_return_rate: Decimal
    current_balance: Decimal
    avg_monthly_contribution: Decimal
    projections: ProjectionSet
    comparison: list[ProfileProjection]
    goals: list[GoalProgress]


__all__ = [
    "WalletSummary",
    "PortfolioHistoryView",
    "ProfileProjection",
    "ProjectionsView",
]
