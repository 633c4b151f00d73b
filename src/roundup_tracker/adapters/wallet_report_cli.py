"""CLI adapter printing the wallet report of one subject."""

import os

from roundup_tracker.domain.constants import DEFAULT_PERIOD
from roundup_tracker.domain.errors import InvalidPeriod
from roundup_tracker.domain.services.decimal_math import (
    format_currency,
    format_percent,
)
from roundup_tracker.infrastructure.container import (
    build_database_adapter,
    build_portfolio_history_use_case,
    build_wallet_summary_use_case,
)
from roundup_tracker.infrastructure.logging.logger import get_app_logger
from roundup_tracker.infrastructure.settings import TrackerSettings


def main() -> None:
    """Print balance, growth, and projections for ROUNDUP_SUBJECT_ID."""
    logger = get_app_logger()
    settings = TrackerSettings.from_env()
    if settings.subject_id is None:
        logger.warning("ROUNDUP_SUBJECT_ID is required to print a report.")
        return
    period = os.getenv("ROUNDUP_REPORT_PERIOD", DEFAULT_PERIOD)

    db_adapter = build_database_adapter()
    try:
        summary = build_wallet_summary_use_case(
            db_adapter,
            settings,
        ).execute(settings.subject_id)
        history_view = build_portfolio_history_use_case(
            db_adapter,
            settings,
        ).execute(settings.subject_id, period=period)
    except (RuntimeError, InvalidPeriod) as exc:
        logger.error(str(exc))
        return

    valuation = summary.valuation
    print(
        f"Wallet report (subject={settings.subject_id}, "
        f"profile={summary.profile_name}, rate={summary.annual_return_rate})"
    )
    print(
        f"Balance: {format_currency(valuation.total_current_value)} "
        f"(principal={format_currency(valuation.total_principal)}, "
        f"growth={format_currency(valuation.total_growth)}, "
        f"{format_percent(valuation.overall_growth_rate_percent)}%)"
    )
    print(
        f"This week: {format_currency(summary.this_week)}, "
        f"this month: {format_currency(summary.this_month)}, "
        f"avg monthly: {format_currency(summary.avg_monthly_contribution)}"
    )
    growth = history_view.period_growth
    print(
        f"Last {growth.period}: added={format_currency(growth.added_this_period)}, "
        f"grew={format_currency(growth.growth_this_period)} "
        f"({format_percent(growth.growth_rate_percent)}%)"
    )
    print(
        "Projections: "
        + ", ".join(
            f"{label}={format_currency(value)}"
            for label, value in summary.projections.as_dict().items()
        )
    )


if __name__ == "__main__":
    main()
