"""Use case to build the portfolio history of a subject."""

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
from roundup_tracker.domain.constants import DEFAULT_PERIOD
from roundup_tracker.domain.models import PortfolioHistoryView
from roundup_tracker.domain.services.contributions import (
    average_contribution_since_first,
    normalize_contributions,
)
from roundup_tracker.domain.services.history import (
    generate_portfolio_history,
)
from roundup_tracker.domain.services.period_growth import (
    compute_period_growth,
)
from roundup_tracker.domain.services.periods import resolve_period
from roundup_tracker.domain.services.valuation import (
    compute_time_weighted_growth,
)
from roundup_tracker.infrastructure.logging.logger import get_app_logger


class GetPortfolioHistoryUseCase:
    """Compute the history series and growth analysis for a window."""

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
            strict_periods: Reject unknown period tokens instead of falling
                back to 30 days.
        """
        self._contributions_repository = contributions_repository
        self._profile_repository = profile_repository
        self._logger = logger or get_app_logger()
        self._strict_periods = strict_periods

    def execute(
        self,
        subject_id: int,
        period: str = DEFAULT_PERIOD,
        as_of: datetime | None = None,
    ) -> PortfolioHistoryView:
        """Return history points, period growth, and current valuation.

        Args:
            subject_id: Subject whose contributions are charted.
            period: Window token (7d, 30d, 90d, 1y).
            as_of: Optional window end (default: now).

        Returns:
            PortfolioHistoryView: Series and analysis for the window.

        Raises:
            InvalidPeriod: If strict periods are enabled and the token is
                unknown.
        """
        window = resolve_period(
            period,
            strict=self._strict_periods,
            logger=self._logger,
        )
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
        history = generate_portfolio_history(
            contributions,
            rate,
            window.token,
            reference,
            logger=self._logger,
        )
        period_growth = compute_period_growth(
            contributions,
            rate,
            window.token,
            reference,
            logger=self._logger,
        )
        self._logger.info(
            f"Built {len(history)} history points ({window.token}) "
            f"for subject {subject_id}"
        )
        return PortfolioHistoryView(
            period=window.token,
            profile_name=profile.name,
            annual_return_rate=rate,
            history=history,
            period_growth=period_growth,
            valuation=valuation,
            avg_daily_contribution=average_contribution_since_first(
                contributions,
                reference,
                interval_days=1,
            ),
        )


__all__ = ["GetPortfolioHistoryUseCase"]
