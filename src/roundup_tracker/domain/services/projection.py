"""Closed-form compound growth projections.

These functions take aggregate scalars (balance, monthly contribution,
rate) and never look at individual contributions.
"""

from collections.abc import Iterable
from decimal import Decimal, ROUND_HALF_UP

from roundup_tracker.domain.constants import (
    COMMON_GOALS,
    CUSTOM_HORIZON_MAX_YEARS,
    CUSTOM_HORIZON_MIN_YEARS,
    DEFAULT_COMPOUNDING_FREQUENCY,
    GOAL_SIMULATION_MAX_MONTHS,
    MONTHS_PER_YEAR,
    PROJECTION_HORIZONS,
)
from roundup_tracker.domain.errors import InvalidAmount
from roundup_tracker.domain.models import (
    CustomProjection,
    GoalProgress,
    GoalTimeline,
    ProjectionSet,
)
from roundup_tracker.domain.services.decimal_math import (
    ONE,
    ZERO,
    arithmetic_context,
    ceil_decimal,
    divide,
    natural_log,
    percent_of,
    power,
    to_currency,
    to_percent,
)
from roundup_tracker.domain.services.validation import (
    parse_non_negative_amount,
    parse_positive_amount,
    validate_rate,
)

YEARS_QUANTUM = Decimal("0.1")


def _parse_frequency(value) -> Decimal:
    frequency = parse_positive_amount(value, label="compounding frequency")
    if frequency != frequency.to_integral_value():
        raise InvalidAmount(
            f"Compounding frequency must be a whole number: {value!r}"
        )
    return frequency


def lump_sum_future_value(
    principal: Decimal,
    annual_rate: Decimal,
    years: Decimal,
    periods_per_year: Decimal = Decimal(DEFAULT_COMPOUNDING_FREQUENCY),
) -> Decimal:
    """Return ``P * (1 + r/n) ** (n*t)`` at engine precision."""
    rate_per_period = divide(annual_rate, periods_per_year)
    return principal * power(ONE + rate_per_period, periods_per_year * years)


def annuity_future_value(
    payment: Decimal,
    annual_rate: Decimal,
    years: Decimal,
    periods_per_year: Decimal = Decimal(MONTHS_PER_YEAR),
) -> Decimal:
    """Return the future value of equal end-of-period payments.

    A zero rate takes the plain ``PMT * n * t`` branch; the annuity factor
    is only evaluated for a non-zero rate.
    """
    periods = periods_per_year * years
    if annual_rate == 0:
        return payment * periods
    rate_per_period = divide(annual_rate, periods_per_year)
    factor = divide(
        power(ONE + rate_per_period, periods) - ONE,
        rate_per_period,
    )
    return payment * factor


def compute_compound_interest(
    principal,
    rate,
    compounding_frequency=DEFAULT_COMPOUNDING_FREQUENCY,
    years=1,
) -> Decimal:
    """Return the compounded future value of a lump sum.

    Args:
        principal: Non-negative starting amount.
        rate: Annual rate in [0, 1].
        compounding_frequency: Compounding periods per year.
        years: Horizon in years, possibly fractional.

    Returns:
        Decimal: Future value with exactly two decimal places.

    Raises:
        InvalidAmount: If principal, frequency, or years are invalid.
        InvalidRate: If the rate is outside [0, 1].
    """
    with arithmetic_context():
        amount = parse_non_negative_amount(principal, label="principal")
        annual_rate = validate_rate(rate)
        frequency = _parse_frequency(compounding_frequency)
        horizon = parse_non_negative_amount(years, label="years")
        return to_currency(
            lump_sum_future_value(amount, annual_rate, horizon, frequency)
        )


def _projected_value(
    balance: Decimal,
    monthly_contribution: Decimal,
    annual_rate: Decimal,
    years: Decimal,
) -> tuple[Decimal, Decimal]:
    from_balance = lump_sum_future_value(balance, annual_rate, years)
    from_contributions = annuity_future_value(
        monthly_contribution,
        annual_rate,
        years,
    )
    return from_balance, from_contributions


def compute_savings_projections(
    balance,
    monthly_contribution,
    annual_rate,
) -> ProjectionSet:
    """Project the balance plus monthly contributions at 1/3/5/10 years.

    Raises:
        InvalidAmount: If balance or contribution is negative or
            non-numeric.
        InvalidRate: If the rate is outside [0, 1].
    """
    with arithmetic_context():
        current = parse_non_negative_amount(balance, label="balance")
        monthly = parse_non_negative_amount(
            monthly_contribution,
            label="monthly contribution",
        )
        rate = validate_rate(annual_rate)
        values: dict[str, Decimal] = {}
        for years in PROJECTION_HORIZONS:
            from_balance, from_contributions = _projected_value(
                current,
                monthly,
                rate,
                Decimal(years),
            )
            values[f"year{years}"] = to_currency(
                from_balance + from_contributions
            )
    return ProjectionSet(**values)


def compute_custom_projection(
    balance,
    monthly_contribution,
    annual_rate,
    years,
) -> CustomProjection:
    """Project over an arbitrary horizon and break the result down.

    Args:
        balance: Current balance.
        monthly_contribution: Expected monthly contribution.
        annual_rate: Annual rate in [0, 1].
        years: Horizon between 0.1 and 50 years.

    Returns:
        CustomProjection: Future value, amounts contributed, and growth.

    Raises:
        InvalidAmount: For negative amounts or an out-of-range horizon.
        InvalidRate: If the rate is outside [0, 1].
    """
    with arithmetic_context():
        current = parse_non_negative_amount(balance, label="balance")
        monthly = parse_non_negative_amount(
            monthly_contribution,
            label="monthly contribution",
        )
        rate = validate_rate(annual_rate)
        horizon = parse_positive_amount(years, label="time horizon")
        if not CUSTOM_HORIZON_MIN_YEARS <= horizon <= CUSTOM_HORIZON_MAX_YEARS:
            raise InvalidAmount(
                f"Time horizon must be between {CUSTOM_HORIZON_MIN_YEARS} "
                f"and {CUSTOM_HORIZON_MAX_YEARS} years: {years!r}"
            )

        from_balance, from_contributions = _projected_value(
            current,
            monthly,
            rate,
            horizon,
        )
        future_value = from_balance + from_contributions
        total_contributions = current + monthly * MONTHS_PER_YEAR * horizon
        total_growth = future_value - total_contributions
        return CustomProjection(
            time_horizon_years=horizon,
            future_value=to_currency(future_value),
            total_contributions=to_currency(total_contributions),
            total_growth=to_currency(total_growth),
            growth_percent=to_percent(
                percent_of(total_growth, total_contributions)
            ),
            from_current_balance=to_currency(from_balance),
            from_contributions=to_currency(from_contributions),
        )


def _months_without_interest(
    remaining: Decimal,
    monthly: Decimal,
) -> int | None:
    if monthly <= 0:
        return None
    return int(ceil_decimal(divide(remaining, monthly)))


def _months_with_interest(
    target: Decimal,
    balance: Decimal,
    monthly: Decimal,
    monthly_rate: Decimal,
) -> int | None:
    if monthly > 0:
        months = 0
        while balance < target and months < GOAL_SIMULATION_MAX_MONTHS:
            balance = balance * (ONE + monthly_rate) + monthly
            months += 1
        return months if balance >= target else None
    if balance <= 0:
        return None
    months = divide(
        natural_log(divide(target, balance)),
        natural_log(ONE + monthly_rate),
    )
    return int(ceil_decimal(months))


def compute_goal_timeline(
    target_amount,
    current_balance,
    monthly_contribution,
    annual_rate,
    include_interest: bool = True,
) -> GoalTimeline:
    """Estimate how many months it takes to reach a savings target.

    With interest and monthly contributions the balance is simulated month
    by month for at most 600 months. With interest and no contributions the
    closed form ``ln(target/balance) / ln(1 + r/12)`` is used. Otherwise the
    remaining amount is divided by the monthly contribution.

    Returns:
        GoalTimeline: ``months_to_reach`` is None when the target cannot be
        reached under the given inputs.

    Raises:
        InvalidAmount: If the target is not positive or an amount is
            negative.
        InvalidRate: If the rate is outside [0, 1].
    """
    with arithmetic_context():
        target = parse_positive_amount(target_amount, label="target amount")
        balance = parse_non_negative_amount(current_balance, label="balance")
        monthly = parse_non_negative_amount(
            monthly_contribution,
            label="monthly contribution",
        )
        rate = validate_rate(annual_rate)

        if balance >= target:
            return GoalTimeline(
                target_amount=target,
                current_balance=balance,
                achieved=True,
                remaining_amount=ZERO,
                months_to_reach=0,
                years_to_reach=ZERO,
                include_interest=include_interest,
            )

        remaining = target - balance
        if include_interest and rate > 0:
            months = _months_with_interest(
                target,
                balance,
                monthly,
                divide(rate, Decimal(MONTHS_PER_YEAR)),
            )
        else:
            months = _months_without_interest(remaining, monthly)

        years = None
        if months is not None:
            years = divide(Decimal(months), Decimal(MONTHS_PER_YEAR)).quantize(
                YEARS_QUANTUM,
                rounding=ROUND_HALF_UP,
            )
        return GoalTimeline(
            target_amount=target,
            current_balance=balance,
            achieved=False,
            remaining_amount=remaining,
            months_to_reach=months,
            years_to_reach=years,
            include_interest=include_interest,
        )


def compute_goal_progress(
    current_balance,
    monthly_contribution,
    goals: Iterable[tuple[str, Decimal]] = COMMON_GOALS,
) -> list[GoalProgress]:
    """Report progress towards named goals without assuming interest."""
    with arithmetic_context():
        balance = parse_non_negative_amount(current_balance, label="balance")
        monthly = parse_non_negative_amount(
            monthly_contribution,
            label="monthly contribution",
        )
        progress: list[GoalProgress] = []
        for name, raw_target in goals:
            target = parse_positive_amount(raw_target, label="goal amount")
            remaining = max(ZERO, target - balance)
            progress.append(
                GoalProgress(
                    name=name,
                    target_amount=target,
                    remaining_amount=to_currency(remaining),
                    progress_percent=to_percent(percent_of(balance, target)),
                    months_to_reach=(
                        0
                        if remaining == 0
                        else _months_without_interest(remaining, monthly)
                    ),
                    achieved=balance >= target,
                )
            )
        return progress


__all__ = [
    "lump_sum_future_value",
    "annuity_future_value",
    "compute_compound_interest",
    "compute_savings_projections",
    "compute_custom_projection",
    "compute_goal_timeline",
    "compute_goal_progress",
]
