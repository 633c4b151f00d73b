"""Tests for the projections use case."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from roundup_tracker.application.use_cases.get_projections import (
    GetProjectionsUseCase,
)
from roundup_tracker.domain.models import Contribution, GrowthProfile

AS_OF = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)

PROFILES = [
    GrowthProfile("conservative", Decimal("0.05"), "Low risk"),
    GrowthProfile("balanced", Decimal("0.08"), "Medium risk"),
    GrowthProfile("aggressive", Decimal("0.12"), "High risk"),
]


def test_execute_compares_all_profiles() -> None:
    """Every profile is projected with the same balance and pace."""
    contributions_repository = MagicMock()
    contributions_repository.fetch_contributions.return_value = [
        Contribution(Decimal("10"), datetime(2024, 5, 10)),
        Contribution(Decimal("30"), datetime(2024, 6, 10)),
    ]
    profile_repository = MagicMock()
    profile_repository.fetch_profile_name.return_value = "balanced"
    profile_repository.fetch_profile.return_value = PROFILES[1]
    profile_repository.fetch_profiles.return_value = PROFILES
    use_case = GetProjectionsUseCase(
        contributions_repository,
        profile_repository,
        logger=MagicMock(),
    )

    view = use_case.execute(5, as_of=AS_OF)

    assert view.profile_name == "balanced"
    assert view.annual_return_rate == Decimal("0.08")
    assert view.avg_monthly_contribution == Decimal("20")
    assert view.current_balance > Decimal("40")
    assert [entry.name for entry in view.comparison] == [
        "conservative",
        "balanced",
        "aggressive",
    ]
    assert view.comparison[1].projections == view.projections
    year10 = [entry.projections.year10 for entry in view.comparison]
    assert year10 == sorted(year10)
    assert len(view.goals) == 4
    assert view.goals[0].name == "Emergency Fund"
