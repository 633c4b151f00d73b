"""Profile comparison presentation logic for the Streamlit UI.

Pure transformations from a ``ProjectionsView`` produced by
``GetProjectionsUseCase`` to a grouped bar model and Plotly figure. The UI
loads the view; nothing here performs IO.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from roundup_tracker.domain.models import ProjectionsView
from roundup_tracker.domain.services.decimal_math import format_currency

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


HORIZON_LABELS = {
    "year1": "1 year",
    "year3": "3 years",
    "year5": "5 years",
    "year10": "10 years",
}


@dataclass(frozen=True)
class ProjectionSeries:
    """Projected values of one profile across the horizons."""

    profile_name: str
    annual_return_rate: Decimal
    values: list[Decimal]
    highlighted: bool = False

    @property
    def label(self) -> str:
        percent = (self.annual_return_rate * 100).normalize()
        return f"{self.profile_name.capitalize()} ({percent:f}%)"


@dataclass(frozen=True)
class ProjectionChartModel:
    """Model used by the UI to render the profile comparison."""

    horizon_labels: list[str]
    series: list[ProjectionSeries]


def build_projection_chart_model(view: ProjectionsView) -> ProjectionChartModel:
    """Build the grouped bar model from a projections view.

    Profiles keep the order returned by the repository; the subject's own
    profile is flagged as highlighted.

    Args:
        view: Projections computed for the subject.

    Returns:
        ProjectionChartModel: One series per profile.
    """
    series = [
        ProjectionSeries(
            profile_name=entry.name,
            annual_return_rate=entry.annual_return_rate,
            values=list(entry.projections.as_dict().values()),
            highlighted=entry.name == view.profile_name,
        )
        for entry in view.comparison
    ]
    return ProjectionChartModel(
        horizon_labels=list(HORIZON_LABELS.values()),
        series=series,
    )


def build_plotly_figure(model: ProjectionChartModel) -> "go.Figure":
    """Build a grouped Plotly bar chart from a projection chart model.

    Args:
        model: Precomputed chart model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Bar(
                name=series.label,
                x=model.horizon_labels,
                y=[float(value) for value in series.values],
                text=[format_currency(value) for value in series.values],
                textposition="outside",
                marker=dict(
                    line=dict(
                        color="#0f1115",
                        width=2 if series.highlighted else 0,
                    )
                ),
            )
            for series in model.series
        ]
    )
    fig.update_layout(
        barmode="group",
        margin=dict(l=8, r=8, t=8, b=8),
        height=420,
        yaxis_title="Projected balance",
        legend=dict(orientation="h"),
    )
    return fig


__all__ = [
    "HORIZON_LABELS",
    "ProjectionSeries",
    "ProjectionChartModel",
    "build_projection_chart_model",
    "build_plotly_figure",
]
