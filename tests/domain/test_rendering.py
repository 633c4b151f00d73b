"""Tests for fixed-scale rendering of engine results."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from roundup_tracker.domain.models import Contribution
from roundup_tracker.domain.services.history import generate_portfolio_history
from roundup_tracker.domain.services.period_growth import compute_period_growth
from roundup_tracker.domain.services.projection import (
    compute_custom_projection,
    compute_goal_progress,
    compute_goal_timeline,
    compute_savings_projections,
)
from roundup_tracker.domain.services.rendering import (
    render_custom_projection,
    render_goal_progress,
    render_goal_timeline,
    render_history,
    render_period_growth,
    render_projection_set,
    render_round_up_batch,
    render_valuation,
)
from roundup_tracker.domain.services.roundup import (
    process_transaction_round_ups,
)
from roundup_tracker.domain.services.valuation import (
    compute_time_weighted_growth,
)

AS_OF = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)


def _contributions() -> list[Contribution]:
    return [
        Contribution(Decimal("1.00"), AS_OF - timedelta(days=22)),
        Contribution(Decimal("2.00"), AS_OF - timedelta(days=8)),
        Contribution(Decimal("3.00"), AS_OF - timedelta(days=3)),
    ]


def test_render_valuation_uses_two_places() -> None:
    """Currency and percent values render with exactly two decimals."""
    result = compute_time_weighted_growth(
        _contributions(),
        Decimal("0.05"),
        AS_OF,
    )

    rendered = render_valuation(result)

    assert rendered["total_principal"] == "6.00"
    assert rendered["total_growth"] == "0.01"
    assert rendered["total_current_value"] == "6.01"
    assert rendered["overall_growth_rate_percent"] == "0.11"
    assert rendered["contribution_count"] == 3
    assert rendered["as_of"] == "2024-06-30T12:00:00+00:00"


def test_render_history_and_period_growth() -> None:
    """History points and period growth render as strings."""
    history = generate_portfolio_history(
        _contributions(),
        Decimal("0.05"),
        "7d",
        AS_OF,
    )
    growth = compute_period_growth(
        _contributions(),
        Decimal("0.05"),
        "30d",
        AS_OF,
    )

    points = render_history(history)
    period = render_period_growth(growth)

    assert points[-1]["date"] == "2024-06-30"
    assert points[-1]["contributions"] == "6.00"
    assert period["added_this_period"] == "6.00"
    assert period["growth_this_period"] == "0.00"
    assert period["growth_rate_percent"] == "0.00"


def test_render_projections_and_goals() -> None:
    """Projection and goal renderers format every amount."""
    projections = render_projection_set(compute_savings_projections(0, 100, 0))
    custom = render_custom_projection(
        compute_custom_projection(1000, 100, "0.12", 1)
    )
    timeline = render_goal_timeline(
        compute_goal_timeline(1000, 100, 100, "0.08", include_interest=False)
    )
    goal = render_goal_progress(compute_goal_progress(500, 100)[0])

    assert projections["year10"] == "12000.00"
    assert custom["future_value"] == "2395.08"
    assert custom["growth_percent"] == "8.87"
    assert timeline["months_to_reach"] == 9
    assert timeline["years_to_reach"] == "0.8"
    assert goal["progress_percent"] == "50.00"


def test_render_round_up_batch() -> None:
    """Round-up batches render each item."""
    rendered = render_round_up_batch(
        process_transaction_round_ups(["4.35", "5"])
    )

    assert rendered["total_round_ups"] == "1.65"
    assert rendered["items"][1] == {
        "original_amount": "5.00",
        "round_up": "1.00",
        "rounded_amount": "6.00",
    }
