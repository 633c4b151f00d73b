"""Domain constants for round-up growth analytics."""

from decimal import Decimal

DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12

# Anti-runaway clamp on per-contribution growth (policy, not a market model).
GROWTH_CAP_RATIO = Decimal("0.30")

DEFAULT_ROUND_UP_UNIT = Decimal("1")
DEFAULT_COMPOUNDING_FREQUENCY = 12

DEFAULT_PERIOD = "30d"

# token -> (window length in days, sampling step in days)
PERIOD_WINDOWS = {
    "7d": (7, 1),
    "30d": (30, 1),
    "90d": (90, 1),
    "1y": (365, 7),
}

PROJECTION_HORIZONS = (1, 3, 5, 10)

CUSTOM_HORIZON_MIN_YEARS = Decimal("0.1")
CUSTOM_HORIZON_MAX_YEARS = Decimal("50")

GOAL_SIMULATION_MAX_MONTHS = 600

RECENT_CONTRIBUTION_MONTHS = 6
DAYS_PER_ACTIVE_MONTH = 30

DEFAULT_PROFILE_NAME = "balanced"

# name -> (annual return rate, description)
DEFAULT_GROWTH_PROFILES = {
    "conservative": (
        Decimal("0.05"),
        "5% annual return - Low risk with government bonds and fixed deposits",
    ),
    "balanced": (
        Decimal("0.08"),
        "8% annual return - Medium risk with mix of stocks and bonds",
    ),
    "aggressive": (
        Decimal("0.12"),
        "12% annual return - High risk with growth stocks and equity funds",
    ),
}

COMMON_GOALS = (
    ("Emergency Fund", Decimal("1000")),
    ("Vacation Fund", Decimal("2500")),
    ("Car Down Payment", Decimal("5000")),
    ("Home Down Payment", Decimal("20000")),
)


__all__ = [
    "DAYS_PER_YEAR",
    "MONTHS_PER_YEAR",
    "GROWTH_CAP_RATIO",
    "DEFAULT_ROUND_UP_UNIT",
    "DEFAULT_COMPOUNDING_FREQUENCY",
    "DEFAULT_PERIOD",
    "PERIOD_WINDOWS",
    "PROJECTION_HORIZONS",
    "CUSTOM_HORIZON_MIN_YEARS",
    "CUSTOM_HORIZON_MAX_YEARS",
    "GOAL_SIMULATION_MAX_MONTHS",
    "RECENT_CONTRIBUTION_MONTHS",
    "DAYS_PER_ACTIVE_MONTH",
    "DEFAULT_PROFILE_NAME",
    "DEFAULT_GROWTH_PROFILES",
    "COMMON_GOALS",
]
