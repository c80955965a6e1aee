"""Data contracts for the projection, chart and hover endpoints."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from paydays.core.chart import ChartGeometry, XAxisMode
from paydays.core.hover import HoverResult
from paydays.core.projection import ProjectionInput, ProjectionResult
from paydays.core.scale import ScaleMode
from paydays.domain.plan import Breakdown
from paydays.models import PlanForm


class ApiModel(BaseModel):
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)


class ProjectionResponse(ApiModel):
    """Single-rate projection with its display summaries."""

    inputs: ProjectionInput
    windfall_period: Optional[int] = Field(None, description="Payday that receives the windfall, if any.")
    result: ProjectionResult
    summary: str
    breakdown: Breakdown
    warnings: List[str] = []


class CompareResponse(ApiModel):
    """Low / base / high rate projections."""

    rates: List[float]
    labels: List[str]
    results: List[ProjectionResult]
    breakdowns: List[Breakdown]


class EasingState(ApiModel):
    """Axis easing value the client keeps between chart requests."""

    display_max: float = Field(0.0, ge=0, description="0 means not initialized yet.")
    reset_token: int = Field(0, ge=0)


class ChartRequest(ApiModel):
    plan: PlanForm = Field(default_factory=PlanForm)
    compare: bool = False
    scale_mode: ScaleMode = ScaleMode.LINEAR
    x_axis_mode: XAxisMode = XAxisMode.AGE
    easing: EasingState = Field(default_factory=EasingState)
    reset_token: Optional[int] = Field(
        None,
        ge=0,
        description="Current refit counter; a value different from easing.resetToken refits immediately.",
    )


class ChartResponse(ApiModel):
    geometry: ChartGeometry
    easing: EasingState
    computed_max: float


class HoverRequest(ApiModel):
    plan: PlanForm = Field(default_factory=PlanForm)
    compare: bool = False
    scale_mode: ScaleMode = ScaleMode.LINEAR
    x_axis_mode: XAxisMode = XAxisMode.AGE
    display_max: Optional[float] = Field(None, ge=0)
    pointer: float = Field(..., description="Horizontal pointer position as a fraction of the plot width.")


class HoverResponse(ApiModel):
    hover: Optional[HoverResult] = None
