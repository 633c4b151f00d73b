"""Streamlit dashboard entry point."""

import sys
from decimal import Decimal

import altair as alt
import streamlit as st

from roundup_tracker.adapters.interface.streamlit.projection_chart import (
    build_plotly_figure,
    build_projection_chart_model,
)
from roundup_tracker.domain.constants import DEFAULT_PERIOD, PERIOD_WINDOWS
from roundup_tracker.domain.errors import RoundUpError
from roundup_tracker.domain.models import (
    GoalTimeline,
    HistoryPoint,
    PortfolioHistoryView,
    ProjectionsView,
    WalletSummary,
)
from roundup_tracker.domain.services.decimal_math import (
    format_percent,
    to_currency,
)
from roundup_tracker.domain.services.projection import (
    compute_custom_projection,
)
from roundup_tracker.domain.services.roundup import compute_round_up
from roundup_tracker.infrastructure.container import (
    build_goal_timeline_use_case,
    build_portfolio_history_use_case,
    build_projections_use_case,
    build_wallet_summary_use_case,
)
from roundup_tracker.infrastructure.logging.logger import get_usage_logger
from roundup_tracker.infrastructure.settings import TrackerSettings

PERIOD_LABELS = {
    "7d": "Last 7 days",
    "30d": "Last 30 days",
    "90d": "Last 90 days",
    "1y": "Last year",
}


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the numpy/pandas modules Altair relies on are usable.

    Returns:
        tuple[bool, str | None]: Status and an error message when broken.
    """
    numpy_module = sys.modules.get("numpy")
    if numpy_module is None:
        try:
            import numpy as numpy_module
        except ImportError as exc:
            return False, f"numpy is not importable: {exc}"
    if not hasattr(numpy_module, "ndarray"):
        return False, "numpy is installed but incomplete (missing ndarray)."

    pandas_module = sys.modules.get("pandas")
    if pandas_module is None:
        try:
            import pandas as pandas_module
        except ImportError as exc:
            return False, f"pandas is not importable: {exc}"
    if not hasattr(pandas_module, "Timestamp"):
        return False, "pandas is installed but incomplete (missing Timestamp)."
    return True, None


def _fetch_wallet_summary(subject_id: int) -> WalletSummary:
    """Fetch the wallet summary for a subject."""
    use_case = build_wallet_summary_use_case()
    return use_case.execute(subject_id)


@st.cache_data(show_spinner=False, ttl=300)
def _load_wallet_summary(subject_id: int) -> WalletSummary:
    """Cached wrapper around _fetch_wallet_summary."""
    return _fetch_wallet_summary(subject_id)


def _fetch_portfolio_history(
    subject_id: int,
    period: str,
) -> PortfolioHistoryView:
    """Fetch the history series for a subject and window."""
    use_case = build_portfolio_history_use_case()
    return use_case.execute(subject_id, period=period)


@st.cache_data(show_spinner=False, ttl=300)
def _load_portfolio_history(
    subject_id: int,
    period: str,
) -> PortfolioHistoryView:
    """Cached wrapper around _fetch_portfolio_history."""
    return _fetch_portfolio_history(subject_id, period)


def _fetch_projections(subject_id: int) -> ProjectionsView:
    """Fetch projections and the profile comparison for a subject."""
    use_case = build_projections_use_case()
    return use_case.execute(subject_id)


@st.cache_data(show_spinner=False, ttl=300)
def _load_projections(subject_id: int) -> ProjectionsView:
    """Cached wrapper around _fetch_projections."""
    return _fetch_projections(subject_id)


def _fetch_goal_timeline(
    subject_id: int,
    target_amount: Decimal,
    include_interest: bool,
) -> GoalTimeline:
    use_case = build_goal_timeline_use_case()
    return use_case.execute(
        subject_id,
        target_amount,
        include_interest=include_interest,
    )


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    return f"${to_currency(value):,.2f}"


def _format_percent(value: Decimal) -> str:
    sign = "+" if value > 0 else ""
    return f"{sign}{format_percent(value)}%"


def _prepare_history_chart_data(
    history: list[HistoryPoint],
) -> list[dict[str, object]]:
    """Convert history points into Altair rows (one row per series)."""
    data: list[dict[str, object]] = []
    for point in history:
        day = point.date.isoformat()
        data.append(
            {
                "date": day,
                "series": "Contributions",
                "amount": float(point.contributions),
                "amount_label": _format_currency(point.contributions),
            }
        )
        data.append(
            {
                "date": day,
                "series": "Growth",
                "amount": float(point.growth),
                "amount_label": _format_currency(point.growth),
            }
        )
    return data


def _render_history_chart(view: PortfolioHistoryView) -> None:
    """Render the stacked contributions/growth area chart."""
    if not view.history:
        st.info("No round-ups yet. The chart appears after the first one.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.error(message)
        return

    data = _prepare_history_chart_data(view.history)
    chart = (
        alt.Chart(alt.Data(values=data))
        .mark_area(opacity=0.8, interpolate="monotone")
        .encode(
            x=alt.X("date:T", title=None),
            y=alt.Y("amount:Q", stack="zero", title="Balance"),
            color=alt.Color(
                "series:N",
                scale=alt.Scale(
                    domain=["Contributions", "Growth"],
                    range=["#457b9d", "#2e7d32"],
                ),
                legend=alt.Legend(orient="bottom", title=None),
            ),
            tooltip=[
                alt.Tooltip("date:T"),
                alt.Tooltip("series:N"),
                alt.Tooltip("amount_label:N", title="Amount"),
            ],
        )
        .properties(height=360)
    )
    st.altair_chart(chart, width="stretch")


def _render_wallet(subject_id: int) -> None:
    """Render balance metrics, the history chart, and period growth."""
    summary = _load_wallet_summary(subject_id)
    valuation = summary.valuation

    balance_col, growth_col, week_col, month_col = st.columns(4)
    balance_col.metric(
        "Balance",
        _format_currency(valuation.total_current_value),
        _format_percent(valuation.overall_growth_rate_percent),
    )
    growth_col.metric("Total growth", _format_currency(valuation.total_growth))
    week_col.metric("This week", _format_currency(summary.this_week))
    month_col.metric("This month", _format_currency(summary.this_month))
    st.caption(
        f"Profile {summary.profile_name} "
        f"({format_percent(summary.annual_return_rate * 100)}% a year), "
        f"{valuation.contribution_count} round-ups"
    )

    period = st.selectbox(
        "Period",
        options=list(PERIOD_WINDOWS),
        index=list(PERIOD_WINDOWS).index(DEFAULT_PERIOD),
        format_func=lambda token: PERIOD_LABELS.get(token, token),
    )
    view = _load_portfolio_history(subject_id, period)
    _render_history_chart(view)

    growth = view.period_growth
    added_col, grew_col = st.columns(2)
    added_col.metric("Added this period", _format_currency(growth.added_this_period))
    grew_col.metric(
        "Grew this period",
        _format_currency(growth.growth_this_period),
        _format_percent(growth.growth_rate_percent),
    )


def _months_label(goal) -> str:
    if goal.achieved:
        return "Reached"
    if goal.months_to_reach is None:
        return "-"
    return str(goal.months_to_reach)


def _render_goals(view: ProjectionsView) -> None:
    st.subheader("Goals")
    data = [
        {
            "Goal": goal.name,
            "Target": _format_currency(goal.target_amount),
            "Progress": f"{format_percent(goal.progress_percent)}%",
            "Months to go": _months_label(goal),
        }
        for goal in view.goals
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_custom_projection(view: ProjectionsView) -> None:
    """Render the what-if projection form."""
    st.subheader("What if")
    monthly = st.number_input(
        "Monthly contribution",
        min_value=0.0,
        value=float(round(view.avg_monthly_contribution, 2)),
        step=5.0,
    )
    years = st.slider("Years", min_value=1, max_value=50, value=10)
    try:
        projection = compute_custom_projection(
            view.current_balance,
            Decimal(str(monthly)),
            view.annual_return_rate,
            years,
        )
    except RoundUpError as exc:
        st.error(str(exc))
        return
    value_col, contributed_col, growth_col = st.columns(3)
    value_col.metric("Future value", _format_currency(projection.future_value))
    contributed_col.metric(
        "Contributed",
        _format_currency(projection.total_contributions),
    )
    growth_col.metric(
        "Growth",
        _format_currency(projection.total_growth),
        _format_percent(projection.growth_percent),
    )


def _render_goal_timeline(subject_id: int) -> None:
    st.subheader("Goal timeline")
    target = st.number_input("Target amount", min_value=1.0, value=1000.0)
    include_interest = st.checkbox("Include growth", value=True)
    try:
        timeline = _fetch_goal_timeline(
            subject_id,
            Decimal(str(target)),
            include_interest,
        )
    except RoundUpError as exc:
        st.error(str(exc))
        return
    if timeline.achieved:
        st.success("Target already reached.")
    elif timeline.months_to_reach is None:
        st.warning("Target not reachable at the current pace.")
    else:
        st.info(
            f"{timeline.months_to_reach} months "
            f"({timeline.years_to_reach} years) to go, "
            f"{_format_currency(timeline.remaining_amount)} remaining."
        )


def _render_projections(subject_id: int) -> None:
    """Render the profile comparison, goals, and what-if tools."""
    view = _load_projections(subject_id)
    st.caption(
        f"Balance {_format_currency(view.current_balance)}, "
        f"average monthly round-ups "
        f"{_format_currency(view.avg_monthly_contribution)}"
    )
    model = build_projection_chart_model(view)
    st.plotly_chart(build_plotly_figure(model), width="stretch")
    _render_goals(view)
    _render_custom_projection(view)
    _render_goal_timeline(subject_id)


def _render_round_up_calculator() -> None:
    st.subheader("Round-up calculator")
    amount = st.number_input("Purchase amount", min_value=0.0, value=4.35)
    try:
        round_up = compute_round_up(Decimal(str(amount)))
    except RoundUpError as exc:
        st.error(str(exc))
        return
    st.metric("Spare change", _format_currency(round_up))


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Round-Up Tracker", layout="wide")
    st.title("Round-Up Tracker")

    settings = TrackerSettings.from_env()
    subject_id = int(
        st.sidebar.number_input(
            "Subject",
            min_value=1,
            value=settings.subject_id or 1,
            step=1,
        )
    )
    page = st.sidebar.selectbox(
        "Page",
        ["Wallet", "Projections", "Calculator"],
    )
    get_usage_logger().info(f"Dashboard page {page} for subject {subject_id}")

    if page == "Calculator":
        _render_round_up_calculator()
        return
    try:
        if page == "Wallet":
            _render_wallet(subject_id)
        else:
            _render_projections(subject_id)
    except RuntimeError as exc:
        st.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
