"""Split window growth into new principal and growth of older principal.

Comparing total balances at the window edges would count principal added
inside the window as growth. Instead the contributions are partitioned at
the window start and only the pre-existing ones are valued twice, once at
each edge.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from logging import Logger

from roundup_tracker.domain.constants import DEFAULT_PERIOD, GROWTH_CAP_RATIO
from roundup_tracker.domain.models import Contribution, PeriodGrowthResult
from roundup_tracker.domain.services.contributions import (
    normalize_contributions,
    sum_amounts,
)
from roundup_tracker.domain.services.decimal_math import (
    ZERO,
    arithmetic_context,
    percent_of,
    to_internal,
)
from roundup_tracker.domain.services.instants import resolve_as_of
from roundup_tracker.domain.services.periods import resolve_period
from roundup_tracker.domain.services.validation import validate_rate
from roundup_tracker.domain.services.valuation import (
    compute_time_weighted_growth,
)


def compute_period_growth(
    contributions: Iterable[Contribution],
    annual_rate,
    period: str = DEFAULT_PERIOD,
    as_of: datetime | date | str | None = None,
    *,
    strict_period: bool = False,
    growth_cap_ratio=GROWTH_CAP_RATIO,
    logger: Logger | None = None,
) -> PeriodGrowthResult:
    """Report principal added and growth earned over a look-back window.

    Args:
        contributions: Contributions in any order.
        annual_rate: Annual return rate in [0, 1].
        period: Window token (7d, 30d, 90d, 1y).
        as_of: Window end (default: now, UTC).
        strict_period: Reject unknown period tokens instead of using 30d.
        growth_cap_ratio: Per-contribution growth ceiling.
        logger: Logger used for warnings and debug output.

    Returns:
        PeriodGrowthResult: ``growth_this_period`` only reflects
        contributions made strictly before the window start, and is never
        negative.

    Raises:
        InvalidRate: If the rate is outside [0, 1].
        InvalidPeriod: If ``strict_period`` is set and the token is unknown.
    """
    log = logger or logging.getLogger(__name__)
    rate = validate_rate(annual_rate)
    window = resolve_period(period, strict=strict_period, logger=log)
    items = normalize_contributions(contributions)
    period_end = resolve_as_of(as_of)
    period_start = period_end - timedelta(days=window.days)

    existing = [item for item in items if item.occurred_at < period_start]
    new_during_period = [
        item for item in items if item.occurred_at >= period_start
    ]

    def _value(subset: list[Contribution], instant: datetime):
        return compute_time_weighted_growth(
            subset,
            rate,
            instant,
            growth_cap_ratio=growth_cap_ratio,
            logger=log,
        )

    at_start = _value(existing, period_start)
    existing_now = _value(existing, period_end)
    current = _value(items, period_end)

    with arithmetic_context():
        added_this_period = sum_amounts(new_during_period)
        growth_this_period = max(
            ZERO,
            existing_now.total_growth - at_start.total_growth,
        )
        growth_rate_percent = to_internal(
            percent_of(growth_this_period, at_start.total_current_value)
        )

    log.debug(
        f"Period {window.token}: existing={len(existing)}, "
        f"new={len(new_during_period)}, added={added_this_period}, "
        f"growth={growth_this_period}"
    )
    return PeriodGrowthResult(
        period=window.token,
        added_this_period=added_this_period,
        growth_this_period=growth_this_period,
        growth_rate_percent=growth_rate_percent,
        current_balance=current.total_current_value,
        period_start=period_start,
        period_end=period_end,
        existing_count=len(existing),
        new_count=len(new_during_period),
        period_start_balance=at_start.total_current_value,
        period_start_growth=at_start.total_growth,
        existing_current_growth=existing_now.total_growth,
    )


__all__ = ["compute_period_growth"]
