from __future__ import annotations

from typing import List, Optional, Tuple

from paydays.core.base import ValueModel
from paydays.core.numbers import clamp, round_half_up
from paydays.core.sampling import Sampler

MIN_RATE_PCT = 1.0
MAX_RATE_PCT = 15.0
DEFAULT_MAX_POINTS = 240


class ProjectionInput(ValueModel):
    """Sanitized inputs for one projection run.

    ``annual_rate_pct`` is an effective annual rate: each payday grows by
    ``(1 + rate) ** (1 / pay_periods_per_year) - 1`` so a full year of paydays
    compounds to exactly the annual rate.
    """

    current_age: float
    retirement_age: float
    starting_amount: float = 0.0
    contribution_per_payday: float = 0.0
    windfall_amount: float = 0.0
    annual_rate_pct: float = 7.0
    pay_periods_per_year: int = 12
    resolved_windfall_period: Optional[int] = None
    max_points: int = DEFAULT_MAX_POINTS


class ProjectionPoint(ValueModel):
    period_index: int
    year_index: float
    balance: float
    total_contrib: float
    interest_earned: float
    interest_this_period: Optional[float] = None


class ProjectionResult(ValueModel):
    years: float
    total_periods: int
    final_balance: float
    final_contrib: float
    final_interest: float
    points: Tuple[ProjectionPoint, ...]


def period_count(current_age: float, retirement_age: float, pay_periods_per_year: int) -> Tuple[float, int]:
    """Return (years, total paydays) until the target age; both are >= 0."""
    years = max(0.0, retirement_age - current_age)
    total_periods = max(0, round_half_up(years * pay_periods_per_year))
    return years, total_periods


def per_period_rate(annual_rate_pct: float, pay_periods_per_year: int) -> float:
    if pay_periods_per_year <= 0:
        return 0.0
    return (1.0 + annual_rate_pct / 100.0) ** (1.0 / pay_periods_per_year) - 1.0


def project(inputs: ProjectionInput) -> ProjectionResult:
    """
    Simulate the balance payday by payday.

    Order of operations (per payday i = 1..total):
      1) Windfall deposit if i is the resolved windfall payday.
      2) Regular contribution.
      3) Growth on the whole balance at the per-payday rate.

    Only sampled points are kept (see ``Sampler``); the final figures always
    come from the last payday of the full run.
    """
    ppy = inputs.pay_periods_per_year
    years, total_periods = period_count(inputs.current_age, inputs.retirement_age, ppy)
    rate = per_period_rate(inputs.annual_rate_pct, ppy)
    sampler = Sampler.for_periods(total_periods, inputs.max_points)

    windfall_at = inputs.resolved_windfall_period if inputs.windfall_amount > 0 else None
    start = inputs.starting_amount
    contribution = inputs.contribution_per_payday

    balance = start
    total_contrib = 0.0

    points: List[ProjectionPoint] = [
        ProjectionPoint(
            period_index=0,
            year_index=0.0,
            balance=balance,
            total_contrib=total_contrib,
            interest_earned=balance - start - total_contrib,
        )
    ]

    for i in range(1, total_periods + 1):
        if i == windfall_at:
            balance += inputs.windfall_amount
            total_contrib += inputs.windfall_amount

        balance += contribution
        total_contrib += contribution

        before_growth = balance
        balance = balance * (1.0 + rate)

        if sampler.keeps(i):
            points.append(
                ProjectionPoint(
                    period_index=i,
                    year_index=i / ppy if ppy > 0 else 0.0,
                    balance=balance,
                    total_contrib=total_contrib,
                    interest_earned=balance - start - total_contrib,
                    interest_this_period=balance - before_growth,
                )
            )

    return ProjectionResult(
        years=years,
        total_periods=total_periods,
        final_balance=balance,
        final_contrib=total_contrib,
        final_interest=balance - start - total_contrib,
        points=tuple(points),
    )


def compare_rates(base_rate_pct: float, spread: float = 2.0) -> List[float]:
    """Low / base / high rates for compare mode, each kept within the allowed range."""
    return [
        clamp(base_rate_pct - spread, MIN_RATE_PCT, MAX_RATE_PCT),
        clamp(base_rate_pct, MIN_RATE_PCT, MAX_RATE_PCT),
        clamp(base_rate_pct + spread, MIN_RATE_PCT, MAX_RATE_PCT),
    ]


def project_comparison(
    inputs: ProjectionInput,
    spread: float = 2.0,
) -> Tuple[List[float], List[ProjectionResult]]:
    """Rerun the projection at base-spread, base and base+spread."""
    rates = compare_rates(inputs.annual_rate_pct, spread)
    results = [project(inputs.model_copy(update={"annual_rate_pct": rate})) for rate in rates]
    return rates, results


__all__ = [
    "MIN_RATE_PCT",
    "MAX_RATE_PCT",
    "DEFAULT_MAX_POINTS",
    "ProjectionInput",
    "ProjectionPoint",
    "ProjectionResult",
    "period_count",
    "per_period_rate",
    "project",
    "compare_rates",
    "project_comparison",
]
