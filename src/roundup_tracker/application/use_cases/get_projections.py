"""Use case to project a subject's savings under every growth profile."""

from datetime import datetime

from roundup_tracker.application.ports.contributions_repository import (
    ContributionsRepositoryPort,
)
from roundup_tracker.application.ports.growth_profiles import (
    GrowthProfileRepositoryPort,
)
from roundup_tracker.application.use_cases.growth_profile_utils import (
    resolve_subject_profile,
)
from roundup_tracker.domain.models import ProfileProjection, ProjectionsView
from roundup_tracker.domain.services.contributions import (
    average_recent_monthly_contribution,
    normalize_contributions,
)
from roundup_tracker.domain.services.projection import (
    compute_goal_progress,
    compute_savings_projections,
)
from roundup_tracker.domain.services.valuation import (
    compute_time_weighted_growth,
)
from roundup_tracker.infrastructure.logging.logger import get_app_logger


class GetProjectionsUseCase:
    """Project the current balance with the recent contribution pace."""

    def __init__(
        self,
        contributions_repository: ContributionsRepositoryPort,
        profile_repository: GrowthProfileRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            contributions_repository: Port providing contribution records.
            profile_repository: Port resolving growth profiles.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._contributions_repository = contributions_repository
        self._profile_repository = profile_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        subject_id: int,
        as_of: datetime | None = None,
    ) -> ProjectionsView:
        """Return projections for the subject's profile and all profiles.

        The monthly contribution is the average calendar-month total over
        the last six months.

        Args:
            subject_id: Subject whose savings are projected.
            as_of: Optional reference instant (default: now).

        Returns:
            ProjectionsView: Current-profile projections, the comparison
            across profiles, and progress towards the common goals.
        """
        contributions = normalize_contributions(
            self._contributions_repository.fetch_contributions(subject_id)
        )
        profile = resolve_subject_profile(
            self._profile_repository,
            subject_id,
            self._logger,
        )
        valuation = compute_time_weighted_growth(
            contributions,
            profile.annual_return_rate,
            as_of,
            logger=self._logger,
        )
        balance = valuation.total_current_value
        avg_monthly = average_recent_monthly_contribution(
            contributions,
            valuation.as_of,
        )

        comparison = [
            ProfileProjection(
                name=candidate.name,
                annual_return_rate=candidate.annual_return_rate,
                description=candidate.description,
                projections=compute_savings_projections(
                    balance,
                    avg_monthly,
                    candidate.annual_return_rate,
                ),
            )
            for candidate in self._profile_repository.fetch_profiles()
        ]
        self._logger.info(
            f"Projected balance {balance} with monthly {avg_monthly} "
            f"across {len(comparison)} profiles"
        )
        return ProjectionsView(
            profile_name=profile.name,
            annual_return_rate=profile.annual_return_rate,
            current_balance=balance,
            avg_monthly_contribution=avg_monthly,
            projections=compute_savings_projections(
                balance,
                avg_monthly,
                profile.annual_return_rate,
            ),
            comparison=comparison,
            goals=compute_goal_progress(balance, avg_monthly),
        )


__all__ = ["GetProjectionsUseCase"]
