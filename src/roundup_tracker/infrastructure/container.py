"""Composition root for wiring infrastructure adapters."""

from roundup_tracker.application.ports.contributions_repository import (
    ContributionsRepositoryPort,
)
from roundup_tracker.application.ports.database import DatabaseEnginePort
from roundup_tracker.application.ports.growth_profiles import (
    GrowthProfileRepositoryPort,
)
from roundup_tracker.application.use_cases.get_goal_timeline import (
    GetGoalTimelineUseCase,
)
from roundup_tracker.application.use_cases.get_portfolio_history import (
    GetPortfolioHistoryUseCase,
)
from roundup_tracker.application.use_cases.get_projections import (
    GetProjectionsUseCase,
)
from roundup_tracker.application.use_cases.get_wallet_summary import (
    GetWalletSummaryUseCase,
)
from roundup_tracker.infrastructure.contributions_repository import (
    SqlAlchemyContributionsRepository,
)
from roundup_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from roundup_tracker.infrastructure.growth_profiles_repository import (
    SqlAlchemyGrowthProfileRepository,
    StaticGrowthProfileRepository,
)
from roundup_tracker.infrastructure.settings import TrackerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_contributions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ContributionsRepositoryPort:
    """Return the contributions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyContributionsRepository(resolved_db)


def build_growth_profile_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: TrackerSettings | None = None,
) -> GrowthProfileRepositoryPort:
    """Return the configured growth profile repository."""
    resolved_settings = settings or TrackerSettings.from_env()
    if resolved_settings.profile_backend == "sqlalchemy":
        resolved_db = db_port or build_database_adapter()
        return SqlAlchemyGrowthProfileRepository(
            resolved_db,
            default_profile=resolved_settings.default_profile,
        )
    return StaticGrowthProfileRepository(resolved_settings.default_profile)


def build_wallet_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: TrackerSettings | None = None,
) -> GetWalletSummaryUseCase:
    """Return the wallet summary use case."""
    resolved_settings = settings or TrackerSettings.from_env()
    resolved_db = db_port or build_database_adapter()
    return GetWalletSummaryUseCase(
        build_contributions_repository(resolved_db),
        build_growth_profile_repository(resolved_db, resolved_settings),
        strict_periods=resolved_settings.strict_periods,
    )


def build_portfolio_history_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: TrackerSettings | None = None,
) -> GetPortfolioHistoryUseCase:
    """Return the portfolio history use case."""
    resolved_settings = settings or TrackerSettings.from_env()
    resolved_db = db_port or build_database_adapter()
    return GetPortfolioHistoryUseCase(
        build_contributions_repository(resolved_db),
        build_growth_profile_repository(resolved_db, resolved_settings),
        strict_periods=resolved_settings.strict_periods,
    )


def build_projections_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: TrackerSettings | None = None,
) -> GetProjectionsUseCase:
    """Return the projections use case."""
    resolved_settings = settings or TrackerSettings.from_env()
    resolved_db = db_port or build_database_adapter()
    return GetProjectionsUseCase(
        build_contributions_repository(resolved_db),
        build_growth_profile_repository(resolved_db, resolved_settings),
    )


def build_goal_timeline_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: TrackerSettings | None = None,
) -> GetGoalTimelineUseCase:
    """Return the goal timeline use case."""
    resolved_settings = settings or TrackerSettings.from_env()
    resolved_db = db_port or build_database_adapter()
    return GetGoalTimelineUseCase(
        build_contributions_repository(resolved_db),
        build_growth_profile_repository(resolved_db, resolved_settings),
    )


__all__ = [
    "build_database_adapter",
    "build_contributions_repository",
    "build_growth_profile_repository",
    "build_wallet_summary_use_case",
    "build_portfolio_history_use_case",
    "build_projections_use_case",
    "build_goal_timeline_use_case",
]
