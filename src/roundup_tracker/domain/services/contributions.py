"""Contribution building and aggregate statistics."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from decimal import Decimal

from roundup_tracker.domain.constants import RECENT_CONTRIBUTION_MONTHS
from roundup_tracker.domain.models import Contribution
from roundup_tracker.domain.services.decimal_math import (
    ZERO,
    arithmetic_context,
    divide,
    to_internal,
)
from roundup_tracker.domain.services.instants import (
    normalize_instant,
    resolve_as_of,
)
from roundup_tracker.domain.services.validation import parse_positive_amount


def build_contribution(amount, occurred_at: datetime | date | str) -> Contribution:
    """Build a validated contribution from raw values.

    Raises:
        InvalidAmount: If the amount is non-numeric, zero, or negative.
    """
    return Contribution(
        amount=parse_positive_amount(amount, label="contribution amount"),
        occurred_at=normalize_instant(occurred_at),
    )


def normalize_contributions(
    contributions: Iterable[Contribution],
) -> list[Contribution]:
    """Return validated copies with Decimal amounts and UTC instants."""
    return [
        build_contribution(item.amount, item.occurred_at)
        for item in contributions
    ]


def sum_amounts(contributions: Iterable[Contribution]) -> Decimal:
    """Return the exact sum of contribution amounts."""
    with arithmetic_context():
        return sum((item.amount for item in contributions), start=ZERO)


def sum_contributions_since(
    contributions: Iterable[Contribution],
    since: datetime,
) -> Decimal:
    """Sum contributions made at or after ``since``."""
    return sum_amounts(
        item for item in contributions if item.occurred_at >= since
    )


def start_of_week(as_of: datetime) -> datetime:
    """Return Monday 00:00 of the week containing ``as_of``."""
    day_start = as_of.replace(hour=0, minute=0, second=0, microsecond=0)
    return day_start - timedelta(days=day_start.weekday())


def start_of_month(as_of: datetime) -> datetime:
    """Return 00:00 on the first day of the month containing ``as_of``."""
    return as_of.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def months_before(instant: datetime, months: int) -> datetime:
    """Shift an instant back by calendar months, clamping the day."""
    month_index = instant.year * 12 + instant.month - 1 - months
    year, month = divmod(month_index, 12)
    month += 1
    next_month = date(year + month // 12, month % 12 + 1, 1)
    last_day = (next_month - timedelta(days=1)).day
    return instant.replace(year=year, month=month, day=min(instant.day, last_day))


def average_recent_monthly_contribution(
    contributions: Iterable[Contribution],
    as_of: datetime | None = None,
    months: int = RECENT_CONTRIBUTION_MONTHS,
) -> Decimal:
    """Average calendar-month totals over a recent window.

    Only months that received at least one contribution since
    ``as_of - months`` take part in the average.

    Returns:
        Decimal: Average monthly total, zero when nothing is recent.
    """
    reference = resolve_as_of(as_of)
    since = months_before(reference, months)
    totals: dict[tuple[int, int], Decimal] = {}
    for item in contributions:
        if item.occurred_at < since or item.occurred_at > reference:
            continue
        key = (item.occurred_at.year, item.occurred_at.month)
        totals[key] = totals.get(key, ZERO) + item.amount
    if not totals:
        return ZERO
    with arithmetic_context():
        return to_internal(
            divide(sum(totals.values(), start=ZERO), Decimal(len(totals)))
        )


def average_contribution_since_first(
    contributions: Iterable[Contribution],
    as_of: datetime | None = None,
    interval_days: int = 30,
) -> Decimal:
    """Average principal per interval since the first contribution.

    The number of intervals is the elapsed time rounded up, with a floor of
    one interval.
    """
    items = list(contributions)
    if not items:
        return ZERO
    reference = resolve_as_of(as_of)
    first = min(item.occurred_at for item in items)
    elapsed = max(reference - first, timedelta(0))
    interval = timedelta(days=interval_days)
    intervals = max(1, -(-elapsed // interval))
    with arithmetic_context():
        return to_internal(divide(sum_amounts(items), Decimal(intervals)))


__all__ = [
    "build_contribution",
    "normalize_contributions",
    "sum_amounts",
    "sum_contributions_since",
    "start_of_week",
    "start_of_month",
    "months_before",
    "average_recent_monthly_contribution",
    "average_contribution_since_first",
]
