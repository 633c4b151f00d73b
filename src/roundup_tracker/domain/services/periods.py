"""Resolution of look-back period tokens."""

import logging
from logging import Logger

from roundup_tracker.domain.constants import DEFAULT_PERIOD, PERIOD_WINDOWS
from roundup_tracker.domain.errors import InvalidPeriod
from roundup_tracker.domain.models import PeriodWindow


def resolve_period(
    token: str | None,
    *,
    strict: bool = False,
    logger: Logger | None = None,
) -> PeriodWindow:
    """Map a period token (7d, 30d, 90d, 1y) to its window.

    Unknown tokens fall back to the 30-day window with a warning unless
    ``strict`` is set.

    Args:
        token: Period token, case and surrounding whitespace ignored.
        strict: Raise instead of falling back for unknown tokens.
        logger: Logger used for the fallback warning.

    Returns:
        PeriodWindow: Window length and sampling step in days.

    Raises:
        InvalidPeriod: If the token is unknown and ``strict`` is true.
    """
    normalized = (token or "").strip().lower()
    if normalized not in PERIOD_WINDOWS:
        if strict:
            raise InvalidPeriod(f"Unknown period: {token!r}")
        log = logger or logging.getLogger(__name__)
        log.warning(
            f"Unknown period {token!r}, falling back to {DEFAULT_PERIOD}"
        )
        normalized = DEFAULT_PERIOD
    days, step_days = PERIOD_WINDOWS[normalized]
    return PeriodWindow(token=normalized, days=days, step_days=step_days)


__all__ = ["resolve_period"]
