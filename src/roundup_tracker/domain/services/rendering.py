"""Fixed-scale string rendering of engine results.

The engine keeps exact Decimals; request layers serialize these
dictionaries so every currency value carries exactly two decimal places and
every percentage uses the same two-place scale.
"""

from roundup_tracker.domain.models import (
    CustomProjection,
    GoalProgress,
    GoalTimeline,
    HistoryPoint,
    PeriodGrowthResult,
    ProjectionSet,
    RoundUpBatch,
    ValuationResult,
)
from roundup_tracker.domain.services.decimal_math import (
    format_currency,
    format_percent,
)


def render_valuation(result: ValuationResult) -> dict[str, object]:
    """Render valuation totals for serialization."""
    return {
        "total_principal": format_currency(result.total_principal),
        "total_growth": format_currency(result.total_growth),
        "total_current_value": format_currency(result.total_current_value),
        "overall_growth_rate_percent": format_percent(
            result.overall_growth_rate_percent
        ),
        "contribution_count": result.contribution_count,
        "annual_rate": format(result.annual_rate, "f"),
        "as_of": result.as_of.isoformat(),
    }


def render_history_point(point: HistoryPoint) -> dict[str, object]:
    """Render one history sample for charting."""
    return {
        "date": point.date.isoformat(),
        "total_balance": format_currency(point.total_balance),
        "contributions": format_currency(point.contributions),
        "growth": format_currency(point.growth),
        "growth_rate_percent": format_percent(point.growth_rate_percent),
        "amount_added_on_date": format_currency(point.amount_added_on_date),
        "contribution_count": point.contribution_count,
    }


def render_history(points: list[HistoryPoint]) -> list[dict[str, object]]:
    return [render_history_point(point) for point in points]


def render_period_growth(result: PeriodGrowthResult) -> dict[str, object]:
    """Render a period growth decomposition."""
    return {
        "period": result.period,
        "added_this_period": format_currency(result.added_this_period),
        "growth_this_period": format_currency(result.growth_this_period),
        "growth_rate_percent": format_percent(result.growth_rate_percent),
        "current_balance": format_currency(result.current_balance),
        "period_start": result.period_start.isoformat(),
        "period_end": result.period_end.isoformat(),
    }


def render_projection_set(projections: ProjectionSet) -> dict[str, str]:
    return {
        label: format_currency(value)
        for label, value in projections.as_dict().items()
    }


def render_custom_projection(projection: CustomProjection) -> dict[str, str]:
    """Render a custom-horizon projection and its breakdown."""
    return {
        "time_horizon_years": format(projection.time_horizon_years, "f"),
        "future_value": format_currency(projection.future_value),
        "total_contributions": format_currency(
            projection.total_contributions
        ),
        "total_growth": format_currency(projection.total_growth),
        "growth_percent": format_percent(projection.growth_percent),
        "from_current_balance": format_currency(
            projection.from_current_balance
        ),
        "from_contributions": format_currency(projection.from_contributions),
    }


def render_goal_timeline(timeline: GoalTimeline) -> dict[str, object]:
    return {
        "target_amount": format_currency(timeline.target_amount),
        "current_balance": format_currency(timeline.current_balance),
        "achieved": timeline.achieved,
        "remaining_amount": format_currency(timeline.remaining_amount),
        "months_to_reach": timeline.months_to_reach,
        "years_to_reach": (
            None
            if timeline.years_to_reach is None
            else format(timeline.years_to_reach, "f")
        ),
        "include_interest": timeline.include_interest,
    }


def render_goal_progress(progress: GoalProgress) -> dict[str, object]:
    return {
        "name": progress.name,
        "target_amount": format_currency(progress.target_amount),
        "remaining_amount": format_currency(progress.remaining_amount),
        "progress_percent": format_percent(progress.progress_percent),
        "months_to_reach": progress.months_to_reach,
        "achieved": progress.achieved,
    }


def render_round_up_batch(batch: RoundUpBatch) -> dict[str, object]:
    """Render a batch of round-ups."""
    return {
        "total_round_ups": format_currency(batch.total_round_ups),
        "processed_count": batch.processed_count,
        "skipped_count": batch.skipped_count,
        "items": [
            {
                "original_amount": format_currency(item.original_amount),
                "round_up": format_currency(item.round_up),
                "rounded_amount": format_currency(item.rounded_amount),
            }
            for item in batch.items
        ],
    }


__all__ = [
    "render_valuation",
    "render_history_point",
    "render_history",
    "render_period_growth",
    "render_projection_set",
    "render_custom_projection",
    "render_goal_timeline",
    "render_goal_progress",
    "render_round_up_batch",
]
