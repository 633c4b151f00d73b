"""Time-weighted valuation of round-up contributions.

Each contribution earns simple (non-compounding) daily interest for the
whole days it has been held, capped at a fixed share of its principal.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from decimal import Decimal
from logging import Logger

from roundup_tracker.domain.constants import DAYS_PER_YEAR, GROWTH_CAP_RATIO
from roundup_tracker.domain.models import (
    Contribution,
    ContributionValuation,
    ValuationResult,
)
from roundup_tracker.domain.services.decimal_math import (
    ZERO,
    arithmetic_context,
    divide,
    percent_of,
    to_internal,
)
from roundup_tracker.domain.services.instants import (
    normalize_instant,
    resolve_as_of,
)
from roundup_tracker.domain.services.validation import (
    parse_non_negative_amount,
    parse_positive_amount,
    validate_rate,
)

ONE_DAY = timedelta(days=1)


def days_held(occurred_at: datetime, as_of: datetime) -> int:
    """Return whole days between two instants, never negative."""
    return max(0, (as_of - occurred_at) // ONE_DAY)


def value_contribution(
    contribution: Contribution,
    daily_rate: Decimal,
    as_of: datetime,
    growth_cap_ratio: Decimal = GROWTH_CAP_RATIO,
) -> ContributionValuation:
    """Value one contribution as of an instant.

    Args:
        contribution: Contribution to value.
        daily_rate: Annual rate divided by 365.
        as_of: Normalized reference instant.
        growth_cap_ratio: Maximum growth as a share of the principal.

    Returns:
        ContributionValuation: Days held, capped growth, and current value.

    Raises:
        InvalidAmount: If the contribution amount is not positive.
    """
    amount = parse_positive_amount(
        contribution.amount,
        label="contribution amount",
    )
    occurred_at = normalize_instant(contribution.occurred_at)
    held = days_held(occurred_at, as_of)
    raw_growth = amount * daily_rate * held
    growth = to_internal(min(raw_growth, amount * growth_cap_ratio))
    return ContributionValuation(
        amount=amount,
        occurred_at=occurred_at,
        days_held=held,
        growth=growth,
        current_value=amount + growth,
        daily_rate=daily_rate,
    )


def compute_time_weighted_growth(
    contributions: Iterable[Contribution],
    annual_rate,
    as_of: datetime | date | str | None = None,
    *,
    growth_cap_ratio=GROWTH_CAP_RATIO,
    logger: Logger | None = None,
) -> ValuationResult:
    """Compute the current value and growth of a contribution set.

    Args:
        contributions: Contributions in any order.
        annual_rate: Annual return rate in [0, 1].
        as_of: Reference instant (default: now, UTC).
        growth_cap_ratio: Per-contribution growth ceiling as a share of
            principal.
        logger: Logger used for debug output.

    Returns:
        ValuationResult: Totals and per-contribution details. An empty set
        yields an all-zero result.

    Raises:
        InvalidRate: If the rate is outside [0, 1].
        InvalidAmount: If a contribution amount is not positive.
    """
    log = logger or logging.getLogger(__name__)
    reference = resolve_as_of(as_of)
    with arithmetic_context():
        rate = validate_rate(annual_rate)
        cap_ratio = parse_non_negative_amount(
            growth_cap_ratio,
            label="growth cap ratio",
        )
        daily_rate = divide(rate, Decimal(DAYS_PER_YEAR))

        details: list[ContributionValuation] = []
        total_principal = ZERO
        total_growth = ZERO
        for contribution in contributions:
            detail = value_contribution(
                contribution,
                daily_rate,
                reference,
                cap_ratio,
            )
            details.append(detail)
            total_principal += detail.amount
            total_growth += detail.growth

        total_current_value = total_principal + total_growth
        growth_rate_percent = to_internal(
            percent_of(total_growth, total_principal)
        )

    log.debug(
        f"Valued {len(details)} contributions as of {reference.isoformat()}: "
        f"principal={total_principal}, growth={total_growth}"
    )
    return ValuationResult(
        total_principal=total_principal,
        total_growth=total_growth,
        total_current_value=total_current_value,
        overall_growth_rate_percent=growth_rate_percent,
        annual_rate=rate,
        daily_rate=daily_rate,
        as_of=reference,
        details=details,
    )


__all__ = [
    "days_held",
    "value_contribution",
    "compute_time_weighted_growth",
]
