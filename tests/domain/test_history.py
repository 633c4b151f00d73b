"""Tests for the portfolio history generator."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from roundup_tracker.domain.errors import InvalidPeriod
from roundup_tracker.domain.models import Contribution
from roundup_tracker.domain.services.history import (
    generate_portfolio_history,
    sample_instants,
)
from roundup_tracker.domain.services.periods import resolve_period
from roundup_tracker.domain.services.valuation import (
    compute_time_weighted_growth,
)

AS_OF = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)
RATE = Decimal("0.08")


def _contribution(amount: str, days_ago: float) -> Contribution:
    return Contribution(
        amount=Decimal(amount),
        occurred_at=AS_OF - timedelta(days=days_ago),
    )


@pytest.mark.parametrize(
    ("period", "expected_points", "last_date"),
    [
        ("7d", 8, date(2024, 6, 30)),
        ("30d", 31, date(2024, 6, 30)),
        ("90d", 91, date(2024, 6, 30)),
        ("1y", 53, date(2024, 6, 29)),
    ],
)
def test_history_length_matches_period(
    period,
    expected_points,
    last_date,
) -> None:
    """Daily windows include both edges; 1y samples weekly."""
    history = generate_portfolio_history(
        [_contribution("1.00", 400)],
        RATE,
        period,
        AS_OF,
    )

    assert len(history) == expected_points
    assert history[-1].date == last_date


def test_weekly_history_steps_by_seven_days() -> None:
    """The 1y series is sampled every seven days."""
    history = generate_portfolio_history(
        [_contribution("1.00", 400)],
        RATE,
        "1y",
        AS_OF,
    )

    assert history[1].date - history[0].date == timedelta(days=7)
    assert history[0].date == date(2023, 7, 1)


def test_empty_contributions_give_empty_history() -> None:
    """Without contributions there is nothing to chart."""
    assert generate_portfolio_history([], RATE, "30d", AS_OF) == []


def test_points_before_first_contribution_are_zero() -> None:
    """Samples before any contribution carry zero balances."""
    history = generate_portfolio_history(
        [_contribution("5.00", 2)],
        RATE,
        "7d",
        AS_OF,
    )

    assert history[0].total_balance == 0
    assert history[0].contribution_count == 0
    assert history[-1].contribution_count == 1
    assert history[-1].contributions == Decimal("5.00")


def test_each_point_matches_a_direct_valuation() -> None:
    """A sample equals the valuation of contributions active at that time."""
    contributions = [
        _contribution("1.00", 22),
        _contribution("2.00", 8),
        _contribution("3.00", 3),
    ]

    history = generate_portfolio_history(contributions, RATE, "7d", AS_OF)

    sample_instant = AS_OF - timedelta(days=4)
    expected = compute_time_weighted_growth(
        [item for item in contributions if item.occurred_at <= sample_instant],
        RATE,
        sample_instant,
    )
    point = history[3]
    assert point.date == sample_instant.date()
    assert point.total_balance == expected.total_current_value
    assert point.growth == expected.total_growth
    assert point.total_balance == point.contributions + point.growth


def test_amount_added_on_date_counts_each_contribution_once() -> None:
    """Every contribution in the window is attributed to one sample."""
    contributions = [
        _contribution("1.00", 22),
        _contribution("2.00", 8),
        _contribution("3.00", 3),
        _contribution("4.00", 7.5),
    ]

    history = generate_portfolio_history(contributions, RATE, "7d", AS_OF)

    added = [point.amount_added_on_date for point in history]
    assert sum(added, Decimal("0")) == Decimal("7.00")
    assert history[0].amount_added_on_date == Decimal("4.00")
    assert history[4].amount_added_on_date == Decimal("3.00")


def test_unknown_period_falls_back_with_warning() -> None:
    """Unknown tokens chart the 30-day window and log a warning."""
    logger = MagicMock()

    history = generate_portfolio_history(
        [_contribution("1.00", 3)],
        RATE,
        "2w",
        AS_OF,
        logger=logger,
    )

    assert len(history) == 31
    logger.warning.assert_called_once()


def test_unknown_period_raises_in_strict_mode() -> None:
    """Strict resolution rejects unknown tokens."""
    with pytest.raises(InvalidPeriod):
        generate_portfolio_history(
            [_contribution("1.00", 3)],
            RATE,
            "2w",
            AS_OF,
            strict_period=True,
        )


def test_sample_instants_stop_at_or_before_as_of():
    """Weekly sampling of 365 days ends one day before the reference."""
    yearly = sample_instants(resolve_period("1y"), AS_OF)
    monthly = sample_instants(resolve_period("30d"), AS_OF)

    assert yearly[0] == AS_OF - timedelta(days=365)
    assert yearly[-1] == AS_OF - timedelta(days=1)
    assert all(instant <= AS_OF for instant in yearly)
    assert monthly[-1] == AS_OF
