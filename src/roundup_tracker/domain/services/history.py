"""Portfolio valuation history for charting.

Each sample re-values the contributions that existed at that instant from
scratch, so a point shows the balance as it would have been measured on
that date. Cost is O(samples x contributions), bounded by 91 daily or 53
weekly samples.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from logging import Logger

from roundup_tracker.domain.constants import DEFAULT_PERIOD, GROWTH_CAP_RATIO
from roundup_tracker.domain.models import (
    Contribution,
    HistoryPoint,
    PeriodWindow,
)
from roundup_tracker.domain.services.contributions import (
    normalize_contributions,
    sum_amounts,
)
from roundup_tracker.domain.services.decimal_math import ZERO
from roundup_tracker.domain.services.instants import resolve_as_of
from roundup_tracker.domain.services.periods import resolve_period
from roundup_tracker.domain.services.validation import validate_rate
from roundup_tracker.domain.services.valuation import (
    compute_time_weighted_growth,
)


def sample_instants(window: PeriodWindow, as_of: datetime) -> list[datetime]:
    """Return instants stepping from ``as_of - window`` up to ``as_of`` at most.

    The window start is always sampled; the last sample is ``as_of`` only
    when the window length is a multiple of the step (``1y`` ends a day
    earlier).
    """
    step = timedelta(days=window.step_days)
    current = as_of - timedelta(days=window.days)
    points: list[datetime] = []
    while current <= as_of:
        points.append(current)
        current += step
    return points


def generate_portfolio_history(
    contributions: Iterable[Contribution],
    annual_rate,
    period: str = DEFAULT_PERIOD,
    as_of: datetime | date | str | None = None,
    *,
    strict_period: bool = False,
    growth_cap_ratio=GROWTH_CAP_RATIO,
    logger: Logger | None = None,
) -> list[HistoryPoint]:
    """Build the valuation series for a look-back window.

    Args:
        contributions: Contributions in any order.
        annual_rate: Annual return rate in [0, 1].
        period: Window token (7d, 30d, 90d daily; 1y weekly).
        as_of: Window end (default: now, UTC).
        strict_period: Reject unknown period tokens instead of using 30d.
        growth_cap_ratio: Per-contribution growth ceiling.
        logger: Logger used for warnings and debug output.

    Returns:
        list[HistoryPoint]: Chronological samples; empty when there are no
        contributions.

    Raises:
        InvalidRate: If the rate is outside [0, 1].
        InvalidPeriod: If ``strict_period`` is set and the token is unknown.
    """
    log = logger or logging.getLogger(__name__)
    rate = validate_rate(annual_rate)
    window = resolve_period(period, strict=strict_period, logger=log)
    items = normalize_contributions(contributions)
    if not items:
        return []

    reference = resolve_as_of(as_of)
    instants = sample_instants(window, reference)
    step = timedelta(days=window.step_days)

    history: list[HistoryPoint] = []
    previous = instants[0] - step
    for instant in instants:
        active = [item for item in items if item.occurred_at <= instant]
        added = sum_amounts(
            item for item in active if item.occurred_at > previous
        )
        previous = instant
        if not active:
            history.append(
                HistoryPoint(
                    date=instant.date(),
                    total_balance=ZERO,
                    contributions=ZERO,
                    growth=ZERO,
                    growth_rate_percent=ZERO,
                    amount_added_on_date=ZERO,
                    contribution_count=0,
                )
            )
            continue
        valuation = compute_time_weighted_growth(
            active,
            rate,
            instant,
            growth_cap_ratio=growth_cap_ratio,
            logger=log,
        )
        history.append(
            HistoryPoint(
                date=instant.date(),
                total_balance=valuation.total_current_value,
                contributions=valuation.total_principal,
                growth=valuation.total_growth,
                growth_rate_percent=valuation.overall_growth_rate_percent,
                amount_added_on_date=added,
                contribution_count=len(active),
            )
        )

    log.debug(
        f"Generated {len(history)} history points for {window.token} "
        f"from {len(items)} contributions"
    )
    return history


__all__ = ["sample_instants", "generate_portfolio_history"]
