"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from loguru import logger
from pydantic import BaseModel, ValidationError

from paydays.config import SETTINGS_KEY, Settings
from paydays.core.easing import AxisEasingState
from paydays.core.formatting import format_rate
from paydays.core.frequency import PAY_FREQUENCIES
from paydays.domain.plan import PlanOutcome, breakdown, chart_for, hover_for, run_plan, summary_line
from paydays.models import PlanForm
from paydays.schemas.meta import FrequenciesResponse, PingResponse
from paydays.schemas.projection import (
    ChartRequest,
    ChartResponse,
    CompareResponse,
    EasingState,
    HoverRequest,
    HoverResponse,
    ProjectionResponse,
)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


def _settings() -> Settings:
    return current_app.config[SETTINGS_KEY]


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _respond(model: BaseModel) -> Any:
    # pydantic writes inf/nan as null; jsonify would emit bare Infinity
    return current_app.response_class(model.model_dump_json(by_alias=True), mimetype="application/json")


def _run(form: PlanForm) -> PlanOutcome:
    settings = _settings()
    outcome = run_plan(form, max_points=settings.max_points, compare_spread=settings.compare_spread)
    inputs = outcome.plan.inputs
    logger.info(
        "projection: age {}->{} at {}% x{}/yr, {} paydays, final {:.2f}",
        inputs.current_age,
        inputs.retirement_age,
        inputs.annual_rate_pct,
        inputs.pay_periods_per_year,
        outcome.result.total_periods,
        outcome.result.final_balance,
    )
    return outcome


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return _respond(PingResponse(message="pong"))


@api_bp.get("/frequencies")
def frequencies() -> Any:
    return _respond(FrequenciesResponse(frequencies=PAY_FREQUENCIES))


@api_bp.post("/projection")
def projection() -> Any:
    """Project one plan at its own rate."""
    form = PlanForm.model_validate(_payload())
    outcome = _run(form)
    response = ProjectionResponse(
        inputs=outcome.plan.inputs,
        windfall_period=outcome.plan.inputs.resolved_windfall_period,
        result=outcome.result,
        summary=summary_line(outcome),
        breakdown=breakdown(outcome.result),
        warnings=outcome.warnings,
    )
    return _respond(response)


@api_bp.post("/projection/compare")
def projection_compare() -> Any:
    """Project the plan at base-2%, base and base+2%."""
    form = PlanForm.model_validate(_payload())
    outcome = _run(form)
    response = CompareResponse(
        rates=outcome.rates,
        labels=[format_rate(rate) for rate in outcome.rates],
        results=outcome.comparison,
        breakdowns=[breakdown(result) for result in outcome.comparison],
    )
    return _respond(response)


@api_bp.post("/chart")
def chart() -> Any:
    """Chart geometry plus the next axis easing state for the client to keep."""
    payload = ChartRequest.model_validate(_payload())
    outcome = _run(payload.plan)
    drawn = chart_for(
        outcome,
        compare=payload.compare,
        scale_mode=payload.scale_mode,
        x_axis_mode=payload.x_axis_mode,
        easing=AxisEasingState(
            display_max=payload.easing.display_max,
            reset_token=payload.easing.reset_token,
        ),
        reset_token=payload.reset_token,
        tick_target=_settings().y_tick_target,
    )
    response = ChartResponse(
        geometry=drawn.geometry,
        easing=EasingState(display_max=drawn.easing.display_max, reset_token=drawn.easing.reset_token),
        computed_max=drawn.computed_max,
    )
    return _respond(response)


@api_bp.post("/chart/hover")
def chart_hover() -> Any:
    payload = HoverRequest.model_validate(_payload())
    outcome = _run(payload.plan)
    hover = hover_for(
        outcome,
        payload.pointer,
        compare=payload.compare,
        scale_mode=payload.scale_mode,
        x_axis_mode=payload.x_axis_mode,
        display_max=payload.display_max,
    )
    return _respond(HoverResponse(hover=hover))
