"""Domain package for the round-up growth engine."""

from .errors import InvalidAmount, InvalidPeriod, InvalidRate, RoundUpError
from .models import (
    Contribution,
    GrowthProfile,
    HistoryPoint,
    PeriodGrowthResult,
    ProjectionSet,
    ValuationResult,
)
from .services import (
    compute_compound_interest,
    compute_period_growth,
    compute_round_up,
    compute_savings_projections,
    compute_time_weighted_growth,
    generate_portfolio_history,
)

__all__ = [
    "RoundUpError",
    "InvalidAmount",
    "InvalidRate",
    "InvalidPeriod",
    "Contribution",
    "GrowthProfile",
    "ValuationResult",
    "HistoryPoint",
    "PeriodGrowthResult",
    "ProjectionSet",
    "compute_round_up",
    "compute_time_weighted_growth",
    "generate_portfolio_history",
    "compute_period_growth",
    "compute_compound_interest",
    "compute_savings_projections",
]
