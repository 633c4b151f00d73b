"""Domain services package."""

from .contributions import (
    average_contribution_since_first,
    average_recent_monthly_contribution,
    build_contribution,
    start_of_month,
    start_of_week,
    sum_contributions_since,
)
from .history import generate_portfolio_history
from .period_growth import compute_period_growth
from .periods import resolve_period
from .projection import (
    compute_compound_interest,
    compute_custom_projection,
    compute_goal_progress,
    compute_goal_timeline,
    compute_savings_projections,
)
from .roundup import (
    compute_round_up,
    process_transaction_round_ups,
    validate_amount,
)
from .valuation import compute_time_weighted_growth

__all__ = [
    "compute_round_up",
    "process_transaction_round_ups",
    "validate_amount",
    "compute_time_weighted_growth",
    "generate_portfolio_history",
    "compute_period_growth",
    "compute_compound_interest",
    "compute_savings_projections",
    "compute_custom_projection",
    "compute_goal_timeline",
    "compute_goal_progress",
    "resolve_period",
    "build_contribution",
    "sum_contributions_since",
    "start_of_week",
    "start_of_month",
    "average_recent_monthly_contribution",
    "average_contribution_since_first",
]
