"""Tests for the composition root."""

from unittest.mock import MagicMock

from roundup_tracker.application.use_cases.get_portfolio_history import (
    GetPortfolioHistoryUseCase,
)
from roundup_tracker.application.use_cases.get_wallet_summary import (
    GetWalletSummaryUseCase,
)
from roundup_tracker.infrastructure import container
from roundup_tracker.infrastructure.contributions_repository import (
    SqlAlchemyContributionsRepository,
)
from roundup_tracker.infrastructure.growth_profiles_repository import (
    SqlAlchemyGrowthProfileRepository,
    StaticGrowthProfileRepository,
)
from roundup_tracker.infrastructure.settings import TrackerSettings


def test_build_growth_profile_repository_static() -> None:
    """The static backend does not touch the database."""
    repository = container.build_growth_profile_repository(
        db_port=MagicMock(),
        settings=TrackerSettings(default_profile="conservative"),
    )

    assert isinstance(repository, StaticGrowthProfileRepository)
    assert repository.fetch_profile_name(1) == "conservative"


def test_build_growth_profile_repository_sqlalchemy() -> None:
    """The sqlalchemy backend reads profiles from the database."""
    db_port = MagicMock()

    repository = container.build_growth_profile_repository(
        db_port=db_port,
        settings=TrackerSettings(profile_backend="sqlalchemy"),
    )

    assert isinstance(repository, SqlAlchemyGrowthProfileRepository)
    assert repository._db_port is db_port


def test_build_contributions_repository_uses_default_adapter(
    monkeypatch,
) -> None:
    """Without a port the SQLAlchemy adapter is created."""
    adapter = MagicMock()
    monkeypatch.setattr(container, "build_database_adapter", lambda: adapter)

    repository = container.build_contributions_repository()

    assert isinstance(repository, SqlAlchemyContributionsRepository)
    assert repository._db_port is adapter


def test_build_use_cases_apply_settings(monkeypatch) -> None:
    """Use cases receive the strict-period flag from settings."""
    monkeypatch.setattr(
        "roundup_tracker.application.use_cases.get_wallet_summary."
        "get_app_logger",
        MagicMock,
    )
    monkeypatch.setattr(
        "roundup_tracker.application.use_cases.get_portfolio_history."
        "get_app_logger",
        MagicMock,
    )
    settings = TrackerSettings(strict_periods=True)

    summary = container.build_wallet_summary_use_case(MagicMock(), settings)
    history = container.build_portfolio_history_use_case(
        MagicMock(),
        settings,
    )

    assert isinstance(summary, GetWalletSummaryUseCase)
    assert isinstance(history, GetPortfolioHistoryUseCase)
    assert summary._strict_periods is True
    assert history._strict_periods is True
