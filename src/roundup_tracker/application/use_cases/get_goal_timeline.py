"""Use case to estimate when a subject reaches a savings target."""

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
from roundup_tracker.domain.models import GoalTimeline
from roundup_tracker.domain.services.contributions import (
    average_recent_monthly_contribution,
    normalize_contributions,
)
from roundup_tracker.domain.services.projection import compute_goal_timeline
from roundup_tracker.domain.services.valuation import (
    compute_time_weighted_growth,
)
from roundup_tracker.infrastructure.logging.logger import get_app_logger


class GetGoalTimelineUseCase:
    """Estimate the months needed to reach a target amount."""

    def __init__(
        self,
        contributions_repository: ContributionsRepositoryPort,
        profile_repository: GrowthProfileRepositoryPort,
        logger=None,
    ) -> None:
        self._contributions_repository = contributions_repository
        self._profile_repository = profile_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        subject_id: int,
        target_amount,
        include_interest: bool = True,
        as_of: datetime | None = None,
    ) -> GoalTimeline:
        """Return the goal timeline for the subject's current pace.

        Args:
            subject_id: Subject whose savings are projected.
            target_amount: Positive savings target.
            include_interest: Compound at the profile rate when true.
            as_of: Optional reference instant (default: now).

        Returns:
            GoalTimeline: Remaining amount and estimated months.

        Raises:
            InvalidAmount: If the target is not a positive amount.
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
        timeline = compute_goal_timeline(
            target_amount,
            valuation.total_current_value,
            average_recent_monthly_contribution(contributions, valuation.as_of),
            profile.annual_return_rate,
            include_interest=include_interest,
        )
        self._logger.info(
            f"Goal {timeline.target_amount} for subject {subject_id}: "
            f"months={timeline.months_to_reach}"
        )
        return timeline


__all__ = ["GetGoalTimelineUseCase"]
