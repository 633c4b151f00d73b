"""Application use cases package."""

from .get_goal_timeline import GetGoalTimelineUseCase
from .get_portfolio_history import GetPortfolioHistoryUseCase
from .get_projections import GetProjectionsUseCase
from .get_wallet_summary import GetWalletSummaryUseCase

__all__ = [
    "GetWalletSummaryUseCase",
    "GetPortfolioHistoryUseCase",
    "GetProjectionsUseCase",
    "GetGoalTimelineUseCase",
]
