"""Chart geometry: map projection series onto a fixed logical SVG canvas.

x is always linear between the smallest and largest year index on screen.
y runs from 0 to the (eased) axis maximum, either linearly or through the
``log10(y + 1)`` transform. Coordinates are in the 920x360 viewBox used by
the front end; padding leaves room for the axis labels.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from loguru import logger

from paydays.core.base import ValueModel
from paydays.core.formatting import format_axis_money
from paydays.core.numbers import clamp, round_half_up
from paydays.core.projection import ProjectionResult
from paydays.core.scale import AxisScale, ScaleMode, build_axis_scale, log_fraction


class XAxisMode(str, Enum):
    AGE = "age"
    YEARS = "years"


@dataclass(frozen=True)
class PlotFrame:
    width: float = 920
    height: float = 360
    pad_left: float = 56
    pad_right: float = 20
    pad_top: float = 18
    pad_bottom: float = 42

    @property
    def left(self) -> float:
        return self.pad_left

    @property
    def right(self) -> float:
        return self.width - self.pad_right

    @property
    def top(self) -> float:
        return self.pad_top

    @property
    def bottom(self) -> float:
        return self.height - self.pad_bottom

    @property
    def inner_width(self) -> float:
        return self.width - self.pad_left - self.pad_right

    @property
    def inner_height(self) -> float:
        return self.height - self.pad_top - self.pad_bottom


DEFAULT_FRAME = PlotFrame()


class SeriesPoint(NamedTuple):
    x: float
    y: float


Series = Tuple[SeriesPoint, ...]


def clean_series(points: Iterable[SeriesPoint]) -> Series:
    """Drop points whose coordinates are not finite numbers."""
    return tuple(p for p in points if math.isfinite(p.x) and math.isfinite(p.y))


def balance_series(result: ProjectionResult) -> Series:
    return clean_series(SeriesPoint(p.year_index, p.balance) for p in result.points)


def contribution_series(result: ProjectionResult) -> Series:
    return clean_series(SeriesPoint(p.year_index, p.total_contrib) for p in result.points)


@dataclass(frozen=True)
class SeriesSet:
    """Balance line(s) plus the shared contributions line.

    One balance series is the single-plan chart; three are the compare chart
    (low, base, high rate), where the middle series anchors hover lookups.
    """

    balances: Tuple[Series, ...]
    contributions: Series = ()
    rates: Tuple[float, ...] = ()

    @classmethod
    def from_results(
        cls,
        results: Sequence[ProjectionResult],
        rates: Sequence[float] = (),
    ) -> "SeriesSet":
        balances = tuple(balance_series(r) for r in results)
        anchor = min(1, len(results) - 1)
        contributions = contribution_series(results[anchor]) if results else ()
        return cls(balances=balances, contributions=contributions, rates=tuple(rates))

    @property
    def compare(self) -> bool:
        return len(self.balances) > 1

    @property
    def anchor(self) -> Series:
        if not self.balances:
            return ()
        return self.balances[min(1, len(self.balances) - 1)]

    @property
    def empty(self) -> bool:
        return not any(self.balances)

    def x_bounds(self) -> Tuple[float, float]:
        xs = [p.x for s in self.balances for p in s if math.isfinite(p.x)]
        if not xs:
            return 0.0, 1.0
        return min(xs), max(xs)

    def y_peak(self) -> float:
        ys = [p.y for s in self.balances for p in s] + [p.y for p in self.contributions]
        return max([1.0, *(y for y in ys if math.isfinite(y))])


def _unit(fraction: float) -> float:
    return clamp(fraction, 0.0, 1.0) if math.isfinite(fraction) else 0.0


class CoordinateMapper:
    """Data space to pixel space for one chart render.

    Fractions are held to [0, 1] so every pixel lands inside the frame.
    """

    def __init__(self, frame: PlotFrame, x_min: float, x_max: float, scale: AxisScale):
        self.frame = frame
        self.x_min = x_min
        self.x_max = x_max
        self.scale = scale
        self.y_min = 0.0

    @classmethod
    def for_series(cls, series_set: SeriesSet, scale: AxisScale, frame: PlotFrame = DEFAULT_FRAME) -> "CoordinateMapper":
        x_min, x_max = series_set.x_bounds()
        return cls(frame, x_min, x_max, scale)

    def x_fraction(self, x: float) -> float:
        if self.x_max == self.x_min or not math.isfinite(x):
            return 0.0
        return _unit((x - self.x_min) / (self.x_max - self.x_min))

    def y_fraction(self, y: float) -> float:
        y_max = self.scale.max
        if self.scale.mode is ScaleMode.LOG:
            return _unit(log_fraction(y, y_max))
        if y_max == self.y_min or not math.isfinite(y):
            return 0.0
        return _unit((y - self.y_min) / (y_max - self.y_min))

    def x_to_px(self, x: float) -> float:
        return self.frame.left + self.x_fraction(x) * self.frame.inner_width

    def y_to_px(self, y: float) -> float:
        return self.frame.bottom - self.y_fraction(y) * self.frame.inner_height

    def path(self, series: Series) -> str:
        return " ".join(
            f"{'M' if i == 0 else 'L'} {self.x_to_px(p.x):.2f} {self.y_to_px(p.y):.2f}"
            for i, p in enumerate(series)
        )


def x_axis_label(x: float, mode: XAxisMode, current_age: float = 0) -> str:
    if XAxisMode(mode) is XAxisMode.AGE:
        return str(round_half_up(current_age + x))
    return str(round_half_up(x))


def resolve_axis_max(series_set: SeriesSet, y_max_override: Optional[float]) -> float:
    """Use the eased maximum when one is set, otherwise fit the data."""
    if y_max_override is not None and math.isfinite(y_max_override) and y_max_override > 0:
        return max(1.0, y_max_override)
    return series_set.y_peak()


class Point(ValueModel):
    x: float
    y: float


class GridLine(ValueModel):
    value: float
    position: float
    label: str


class ChartGeometry(ValueModel):
    width: float
    height: float
    empty: bool = False
    scale: Optional[AxisScale] = None
    y_grid: List[GridLine] = []
    x_grid: List[GridLine] = []
    lines: List[str] = []
    area: Optional[str] = None
    contributions: Optional[str] = None
    end_dot: Optional[Point] = None
    baseline: Optional[float] = None


def build_chart(
    series_set: SeriesSet,
    *,
    scale_mode: ScaleMode = ScaleMode.LINEAR,
    y_max_override: Optional[float] = None,
    x_axis_mode: XAxisMode = XAxisMode.AGE,
    current_age: float = 0,
    tick_target: int = 3,
    frame: PlotFrame = DEFAULT_FRAME,
) -> ChartGeometry:
    if series_set.empty:
        logger.debug("no finite points to draw; returning empty chart")
        return ChartGeometry(width=frame.width, height=frame.height, empty=True)

    scale = build_axis_scale(scale_mode, resolve_axis_max(series_set, y_max_override), tick_target)
    mapper = CoordinateMapper.for_series(series_set, scale, frame)

    y_grid = [
        GridLine(value=tick, position=mapper.y_to_px(tick), label=format_axis_money(tick))
        for tick in scale.ticks
    ]
    x_mid = (mapper.x_min + mapper.x_max) / 2
    x_grid = [
        GridLine(value=x, position=mapper.x_to_px(x), label=x_axis_label(x, x_axis_mode, current_age))
        for x in (mapper.x_min, x_mid, mapper.x_max)
    ]

    lines = [mapper.path(s) for s in series_set.balances]
    contributions = mapper.path(series_set.contributions) if len(series_set.contributions) > 1 else None

    area = None
    end_dot = None
    if not series_set.compare:
        series = series_set.balances[0]
        base_y = mapper.y_to_px(0)
        area = (
            f"{lines[0]} L {mapper.x_to_px(mapper.x_max):.2f} {base_y:.2f} "
            f"L {mapper.x_to_px(mapper.x_min):.2f} {base_y:.2f} Z"
        )
        last = series[-1]
        end_dot = Point(x=mapper.x_to_px(last.x), y=mapper.y_to_px(last.y))

    return ChartGeometry(
        width=frame.width,
        height=frame.height,
        scale=scale,
        y_grid=y_grid,
        x_grid=x_grid,
        lines=lines,
        area=area,
        contributions=contributions,
        end_dot=end_dot,
        baseline=frame.bottom,
    )


__all__ = [
    "XAxisMode",
    "PlotFrame",
    "DEFAULT_FRAME",
    "SeriesPoint",
    "Series",
    "clean_series",
    "balance_series",
    "contribution_series",
    "SeriesSet",
    "CoordinateMapper",
    "x_axis_label",
    "resolve_axis_max",
    "Point",
    "GridLine",
    "ChartGeometry",
    "build_chart",
]
