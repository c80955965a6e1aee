from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from paydays.core.base import ValueModel
from paydays.core.chart import ChartGeometry, CoordinateMapper, SeriesSet, XAxisMode, build_chart
from paydays.core.easing import AxisEasingState, computed_y_max, step_display_max
from paydays.core.formatting import format_currency, format_plain_number
from paydays.core.frequency import payday_noun, periods_per_year
from paydays.core.hover import HoverResult, resolve_hover
from paydays.core.numbers import clamp, clamp_int, parse_num
from paydays.core.projection import (
    DEFAULT_MAX_POINTS,
    MAX_RATE_PCT,
    MIN_RATE_PCT,
    ProjectionInput,
    ProjectionResult,
    period_count,
    project,
    project_comparison,
)
from paydays.core.scale import ScaleMode, build_axis_scale
from paydays.core.windfall import (
    AtAge,
    AtPaydayIndex,
    AtYear,
    NextPayday,
    NoWindfall,
    WindfallPolicy,
    resolve_windfall_period,
)
from paydays.models import PlanForm

MIN_AGE = 0
MAX_AGE = 120
DEFAULT_TARGET_AGE = 65


@dataclass
class PreparedPlan:
    inputs: ProjectionInput
    policy: WindfallPolicy
    frequency_key: str
    total_periods: int
    warnings: List[str] = field(default_factory=list)


@dataclass
class PlanOutcome:
    plan: PreparedPlan
    result: ProjectionResult
    rates: List[float]
    comparison: List[ProjectionResult]

    @property
    def warnings(self) -> List[str]:
        return self.plan.warnings


@dataclass
class ChartOutcome:
    geometry: ChartGeometry
    easing: AxisEasingState
    computed_max: float


class Breakdown(ValueModel):
    contributions: float
    growth: float
    contributions_pct: float
    growth_pct: float


def default_retirement_age(current_age: int) -> int:
    """Target age when none is given: 65, or today's age for anyone already past it."""
    return current_age if current_age > DEFAULT_TARGET_AGE else DEFAULT_TARGET_AGE


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def windfall_policy_from_form(form: PlanForm) -> WindfallPolicy:
    when = (form.windfall_when or "none").strip().lower()
    if when == "now":
        return NextPayday()
    if when == "year":
        return AtYear(year=parse_num(form.windfall_at_year))
    if when == "age":
        return AtAge(age=parse_num(form.windfall_at_age))
    if when == "payday":
        return AtPaydayIndex(payday=parse_num(form.windfall_at_payday))
    return NoWindfall()


def prepare_plan(form: PlanForm, max_points: int = DEFAULT_MAX_POINTS) -> PreparedPlan:
    """
    Sanitize raw form values into projection inputs.

    Nothing here raises: unparseable numbers become 0 and out-of-range values
    are clamped. The windfall payday is resolved against the same payday count
    the simulator will use.
    """
    warnings: List[str] = []

    current_age = clamp(parse_num(form.current_age), MIN_AGE, MAX_AGE)
    # whole years anchor the default target age and the "at age" windfall
    whole_age = clamp_int(current_age, MIN_AGE, MAX_AGE)
    if _is_blank(form.retirement_age):
        retirement_age = default_retirement_age(whole_age)
    else:
        retirement_age = clamp(parse_num(form.retirement_age), MIN_AGE, MAX_AGE)
    if retirement_age < current_age:
        warnings.append("Target age is earlier than current age; projection will show 0 years.")

    ppy = periods_per_year(form.frequency_key)
    _, total_periods = period_count(current_age, retirement_age, ppy)

    windfall_amount = max(0.0, parse_num(form.windfall_amount))
    policy = windfall_policy_from_form(form)
    windfall_period = resolve_windfall_period(
        policy,
        amount=windfall_amount,
        current_age=whole_age,
        periods_per_year=ppy,
        total_periods=total_periods,
    )

    inputs = ProjectionInput(
        current_age=current_age,
        retirement_age=retirement_age,
        starting_amount=parse_num(form.starting_amount),
        contribution_per_payday=parse_num(form.contribution_per_payday),
        windfall_amount=windfall_amount,
        annual_rate_pct=clamp(parse_num(form.annual_rate_pct), MIN_RATE_PCT, MAX_RATE_PCT),
        pay_periods_per_year=ppy,
        resolved_windfall_period=windfall_period,
        max_points=max_points,
    )
    return PreparedPlan(
        inputs=inputs,
        policy=policy,
        frequency_key=form.frequency_key,
        total_periods=total_periods,
        warnings=warnings,
    )


def run_plan(form: PlanForm, max_points: int = DEFAULT_MAX_POINTS, compare_spread: float = 2.0) -> PlanOutcome:
    plan = prepare_plan(form, max_points)
    result = project(plan.inputs)
    rates, comparison = project_comparison(plan.inputs, compare_spread)
    return PlanOutcome(plan=plan, result=result, rates=rates, comparison=comparison)


def summary_line(outcome: PlanOutcome) -> str:
    inputs = outcome.plan.inputs
    result = outcome.result
    return (
        f"Save {format_currency(inputs.contribution_per_payday)} each {payday_noun(outcome.plan.frequency_key)}"
        f" • {inputs.annual_rate_pct:.1f}% average"
        f" • {result.years:g} years ({format_plain_number(result.total_periods)} paydays)"
    )


def breakdown(result: ProjectionResult) -> Breakdown:
    """Split the final balance into deposits and compounded growth."""
    total = max(0.0, result.final_contrib + result.final_interest)
    contrib_pct = result.final_contrib / total * 100 if total else 0.0
    growth_pct = result.final_interest / total * 100 if total else 0.0
    return Breakdown(
        contributions=result.final_contrib,
        growth=result.final_interest,
        contributions_pct=clamp(contrib_pct, 0.0, 100.0),
        growth_pct=clamp(growth_pct, 0.0, 100.0),
    )


def visible_results(outcome: PlanOutcome, compare: bool) -> List[ProjectionResult]:
    return list(outcome.comparison) if compare else [outcome.result]


def series_for(outcome: PlanOutcome, compare: bool) -> SeriesSet:
    if compare:
        return SeriesSet.from_results(outcome.comparison, outcome.rates)
    return SeriesSet.from_results([outcome.result], [outcome.plan.inputs.annual_rate_pct])


def chart_for(
    outcome: PlanOutcome,
    *,
    compare: bool = False,
    scale_mode: ScaleMode = ScaleMode.LINEAR,
    x_axis_mode: XAxisMode = XAxisMode.AGE,
    easing: Optional[AxisEasingState] = None,
    reset_token: Optional[int] = None,
    tick_target: int = 3,
) -> ChartOutcome:
    """Advance the axis easing by one cycle and lay out the chart."""
    previous = easing or AxisEasingState()
    token = previous.reset_token if reset_token is None else reset_token
    computed = computed_y_max(visible_results(outcome, compare))
    state = step_display_max(previous, computed, token)
    if state.display_max != computed:
        logger.debug("axis easing: display max {} (data max {})", state.display_max, computed)

    geometry = build_chart(
        series_for(outcome, compare),
        scale_mode=scale_mode,
        y_max_override=state.display_max,
        x_axis_mode=x_axis_mode,
        current_age=outcome.plan.inputs.current_age,
        tick_target=tick_target,
    )
    return ChartOutcome(geometry=geometry, easing=state, computed_max=computed)


def hover_for(
    outcome: PlanOutcome,
    pointer: float,
    *,
    compare: bool = False,
    scale_mode: ScaleMode = ScaleMode.LINEAR,
    x_axis_mode: XAxisMode = XAxisMode.AGE,
    display_max: Optional[float] = None,
) -> Optional[HoverResult]:
    series_set = series_for(outcome, compare)
    y_max = display_max if display_max and display_max > 0 else computed_y_max(visible_results(outcome, compare))
    mapper = CoordinateMapper.for_series(series_set, build_axis_scale(scale_mode, y_max))
    return resolve_hover(
        pointer,
        series_set,
        mapper,
        x_axis_mode=x_axis_mode,
        current_age=outcome.plan.inputs.current_age,
    )
