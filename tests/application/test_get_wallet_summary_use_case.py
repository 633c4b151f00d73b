"""Tests for the wallet summary use case."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from roundup_tracker.application.use_cases.get_wallet_summary import (
    GetWalletSummaryUseCase,
)
from roundup_tracker.domain.models import Contribution, GrowthProfile
from roundup_tracker.domain.services.projection import (
    compute_savings_projections,
)

AS_OF = datetime(2024, 6, 12, 12, 0, tzinfo=timezone.utc)


def _repositories():
    contributions_repository = MagicMock()
    contributions_repository.fetch_contributions.return_value = [
        Contribution(Decimal("5.00"), datetime(2024, 5, 1)),
        Contribution(Decimal("3.00"), datetime(2024, 6, 3, 9)),
        Contribution(Decimal("2.00"), datetime(2024, 6, 11, 18)),
    ]
    profile_repository = MagicMock()
    profile_repository.fetch_profile_name.return_value = "balanced"
    profile_repository.fetch_profile.return_value = GrowthProfile(
        name="balanced",
        annual_return_rate=Decimal("0.08"),
    )
    return contributions_repository, profile_repository


def test_execute_builds_summary() -> None:
    """The summary combines valuation, recent totals, and projections."""
    contributions_repository, profile_repository = _repositories()
    logger = MagicMock()
    use_case = GetWalletSummaryUseCase(
        contributions_repository,
        profile_repository,
        logger=logger,
    )

    summary = use_case.execute(7, as_of=AS_OF)

    contributions_repository.fetch_contributions.assert_called_once_with(7)
    profile_repository.fetch_profile_name.assert_called_once_with(7)
    profile_repository.fetch_profile.assert_called_once_with("balanced")
    assert summary.profile_name == "balanced"
    assert summary.as_of == AS_OF
    assert summary.valuation.total_principal == Decimal("10.00")
    assert summary.total_balance == summary.valuation.total_current_value
    assert summary.this_week == Decimal("2.00")
    assert summary.this_month == Decimal("5.00")
    assert summary.avg_monthly_contribution == Decimal("5")
    assert summary.monthly_growth.period == "30d"
    assert summary.monthly_growth.added_this_period == Decimal("5.00")
    assert summary.projections == compute_savings_projections(
        summary.total_balance,
        Decimal("5"),
        Decimal("0.08"),
    )
    logger.info.assert_called()


def test_execute_without_contributions() -> None:
    """A subject with no round-ups gets a zero summary."""
    contributions_repository, profile_repository = _repositories()
    contributions_repository.fetch_contributions.return_value = []
    use_case = GetWalletSummaryUseCase(
        contributions_repository,
        profile_repository,
        logger=MagicMock(),
    )

    summary = use_case.execute(7, as_of=AS_OF)

    assert summary.total_balance == 0
    assert summary.this_week == 0
    assert summary.avg_monthly_contribution == 0
    assert summary.projections.year10 == Decimal("0.00")
