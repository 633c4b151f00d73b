"""Domain models package."""

from .contributions import Contribution, GrowthProfile
from .projections import (
    CustomProjection,
    GoalProgress,
    GoalTimeline,
    ProjectionSet,
)
from .reports import (
    PortfolioHistoryView,
    ProfileProjection,
    ProjectionsView,
    WalletSummary,
)
from .roundups import RoundUpBatch, RoundUpItem
from .valuation import (
    ContributionValuation,
    HistoryPoint,
    PeriodGrowthResult,
    PeriodWindow,
    ValuationResult,
)

__all__ = [
    "Contribution",
    "GrowthProfile",
    "ContributionValuation",
    "ValuationResult",
    "PeriodWindow",
    "HistoryPoint",
    "PeriodGrowthResult",
    "ProjectionSet",
    "CustomProjection",
    "GoalTimeline",
    "GoalProgress",
    "RoundUpItem",
    "RoundUpBatch",
    "WalletSummary",
    "PortfolioHistoryView",
    "ProfileProjection",
    "ProjectionsView",
]
