"""Tests for contribution statistics helpers."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from roundup_tracker.domain.errors import InvalidAmount
from roundup_tracker.domain.models import Contribution
from roundup_tracker.domain.services.contributions import (
    average_contribution_since_first,
    average_recent_monthly_contribution,
    build_contribution,
    months_before,
    normalize_contributions,
    start_of_month,
    start_of_week,
    sum_contributions_since,
)

UTC = timezone.utc


def _at(*args) -> datetime:
    return datetime(*args, tzinfo=UTC)


def test_build_contribution_normalizes_values() -> None:
    """Raw amounts and ISO strings become Decimal and aware UTC values."""
    contribution = build_contribution("0.65", "2024-06-01T10:30:00Z")

    assert contribution.amount == Decimal("0.65")
    assert contribution.occurred_at == _at(2024, 6, 1, 10, 30)


def test_build_contribution_converts_offsets_to_utc() -> None:
    """Offsets are converted to UTC."""
    contribution = build_contribution(1, "2024-06-01T02:00:00+02:00")

    assert contribution.occurred_at == _at(2024, 6, 1, 0, 0)
    assert contribution.occurred_at.tzinfo == UTC


def test_build_contribution_rejects_non_positive_amount() -> None:
    """Contributions must be positive."""
    with pytest.raises(InvalidAmount):
        build_contribution("0", "2024-06-01")


def test_normalize_contributions_accepts_naive_datetimes() -> None:
    """Naive datetimes are treated as UTC."""
    items = normalize_contributions(
        [Contribution(amount=2, occurred_at=datetime(2024, 6, 1, 8))]
    )

    assert items[0].amount == Decimal("2")
    assert items[0].occurred_at == _at(2024, 6, 1, 8)


def test_week_and_month_boundaries() -> None:
    """Weeks start on Monday; months on the first day."""
    wednesday = _at(2024, 6, 12, 15, 45)

    assert start_of_week(wednesday) == _at(2024, 6, 10)
    assert start_of_month(wednesday) == _at(2024, 6, 1)


def test_sum_contributions_since_includes_boundary() -> None:
    """Contributions at the boundary instant count."""
    contributions = [
        Contribution(Decimal("1.00"), _at(2024, 6, 10)),
        Contribution(Decimal("2.00"), _at(2024, 6, 9, 23, 59)),
        Contribution(Decimal("3.00"), _at(2024, 6, 11)),
    ]

    assert sum_contributions_since(
        contributions,
        _at(2024, 6, 10),
    ) == Decimal("4.00")


def test_months_before_clamps_day() -> None:
    """Shifting to a shorter month clamps to its last day."""
    assert months_before(_at(2024, 3, 31), 1) == _at(2024, 2, 29)
    assert months_before(_at(2024, 1, 15), 6) == _at(2023, 7, 15)


def test_average_recent_monthly_contribution() -> None:
    """Only months with contributions in the last six months count."""
    contributions = [
        Contribution(Decimal("10"), _at(2024, 6, 5)),
        Contribution(Decimal("20"), _at(2024, 6, 20)),
        Contribution(Decimal("30"), _at(2024, 5, 10)),
        Contribution(Decimal("100"), _at(2023, 11, 1)),
    ]

    average = average_recent_monthly_contribution(
        contributions,
        _at(2024, 6, 30),
    )

    assert average == Decimal("30")


def test_average_recent_monthly_contribution_without_recent_data() -> None:
    """Old contributions alone give a zero average."""
    contributions = [Contribution(Decimal("100"), _at(2020, 1, 1))]

    assert average_recent_monthly_contribution(
        contributions,
        _at(2024, 6, 30),
    ) == 0


def test_average_contribution_since_first_rounds_intervals_up() -> None:
    """45 days of activity count as two 30-day intervals."""
    first = _at(2024, 5, 1)
    contributions = [
        Contribution(Decimal("4"), first),
        Contribution(Decimal("6"), first + timedelta(days=20)),
    ]

    average = average_contribution_since_first(
        contributions,
        first + timedelta(days=45),
    )

    assert average == Decimal("5")


def test_average_contribution_since_first_has_one_interval_minimum() -> None:
    """Fresh activity divides by a single interval."""
    first = _at(2024, 5, 1)
    contributions = [Contribution(Decimal("4"), first)]

    assert average_contribution_since_first(contributions, first) == 4
    assert average_contribution_since_first([], first) == 0
    assert average_contribution_since_first(
        contributions,
        first + timedelta(days=3),
        interval_days=1,
    ) == Decimal("1.3333333333")
