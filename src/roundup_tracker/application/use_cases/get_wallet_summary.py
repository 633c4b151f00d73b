"""Use case to compute the wallet summary of a subject."""

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
from roundup_tracker.domain.constants import DAYS_PER_ACTIVE_MONTH
from roundup_tracker.domain.models import WalletSummary
from roundup_tracker.domain.services.contributions import (
    average_contribution_since_first,
    normalize_contributions,
    start_of_month,
    start_of_week,
    sum_contributions_since,
)
from roundup_tracker.domain.services.period_growth import (
    compute_period_growth,
)
from roundup_tracker.domain.services.projection import (
    compute_savings_projections,
)
from roundup_tracker.domain.services.valuation import (
    compute_time_weighted_growth,
)
from roundup_tracker.infrastructure.logging.logger import get_app_logger

SUMMARY_PERIOD = "30d"


class GetWalletSummaryUseCase:
    """Compute the balance, recent contributions, and projections."""

    def __init__(
        self,
        contributions_repository: ContributionsRepositoryPort,
        profile_repository: GrowthProfileRepositoryPort,
        logger=None,
        strict_periods: bool = False,
    ) -> None:
        """Initialize the use case.

        Args:
            contributions_repository: Port providing contribution records.
            profile_repository: Port resolving growth profiles.
            logger: Optional logger compatible with logging.Logger-like API.
            strict_periods: Reject unknown period tokens.
        """
        self._contributions_repository = contributions_repository
        self._profile_repository = profile_repository
        self._logger = logger or get_app_logger()
        self._strict_periods = strict_periods

    def execute(
        self,
        subject_id: int,
        as_of: datetime | None = None,
    ) -> WalletSummary:
        """Return the wallet summary.

        Args:
            subject_id: Subject whose contributions are summarized.
            as_of: Optional reference instant (default: now).

        Returns:
            WalletSummary: Current valuation, this week and this month
            totals, average monthly contribution, 30-day growth, and
            projections.
        """
        contributions = normalize_contributions(
            self._contributions_repository.fetch_contributions(subject_id)
        )
        profile = resolve_subject_profile(
            self._profile_repository,
            subject_id,
            self._logger,
        )
        rate = profile.annual_return_rate

        valuation = compute_time_weighted_growth(
            contributions,
            rate,
            as_of,
            logger=self._logger,
        )
        reference = valuation.as_of
        avg_monthly = average_contribution_since_first(
            contributions,
            reference,
            interval_days=DAYS_PER_ACTIVE_MONTH,
        )
        monthly_growth = compute_period_growth(
            contributions,
            rate,
            SUMMARY_PERIOD,
            reference,
            strict_period=self._strict_periods,
            logger=self._logger,
        )
        projections = compute_savings_projections(
            valuation.total_current_value,
            avg_monthly,
            rate,
        )

        self._logger.info(
            f"Wallet summary for subject {subject_id}: "
            f"balance={valuation.total_current_value}, "
            f"contributions={valuation.contribution_count}"
        )
        return WalletSummary(
            profile_name=profile.name,
            annual_return_rate=rate,
            valuation=valuation,
            this_week=sum_contributions_since(
                contributions,
                start_of_week(reference),
            ),
            this_month=sum_contributions_since(
                contributions,
                start_of_month(reference),
            ),
            avg_monthly_contribution=avg_monthly,
            monthly_growth=monthly_growth,
            projections=projections,
            as_of=reference,
        )


__all__ = ["GetWalletSummaryUseCase"]
