"""Pointer lookups for the chart tooltip.

Hover works on sample indexes, not pixels: the pointer's horizontal fraction
across the plot picks ``round(t * (n - 1))`` in the anchor series, and every
other series is read at the same index (clamped to its own length).
"""

from __future__ import annotations

import math
from typing import List, Optional

from paydays.core.base import ValueModel
from paydays.core.chart import CoordinateMapper, PlotFrame, SeriesSet, XAxisMode, x_axis_label
from paydays.core.numbers import clamp, round_half_up
from paydays.core.scale import ScaleMode, build_axis_scale

# tooltip offsets in logical pixels
TOOLTIP_OFFSET_X = 12
TOOLTIP_FLIPPED_OFFSET_X = -184
TOOLTIP_OFFSET_Y = -14
TOOLTIP_FLIPPED_OFFSET_Y = 14
TOOLTIP_RIGHT_MARGIN = 220
TOOLTIP_TOP_MARGIN = 60


class TooltipPlacement(ValueModel):
    dx: float
    dy: float
    flipped_x: bool
    flipped_y: bool


class HoverValue(ValueModel):
    series: int
    rate: Optional[float] = None
    y: float


class HoverResult(ValueModel):
    index: int
    x: float
    label: str
    values: List[HoverValue]
    contrib: Optional[float] = None
    px: float
    py: float
    tooltip: TooltipPlacement


def sample_index(pointer_fraction: float, sample_count: int) -> int:
    if sample_count <= 0:
        return 0
    t = clamp(pointer_fraction, 0.0, 1.0) if math.isfinite(pointer_fraction) else 0.0
    index = round_half_up(t * (sample_count - 1))
    return int(clamp(index, 0, sample_count - 1))


def place_tooltip(px: float, py: float, frame: PlotFrame) -> TooltipPlacement:
    """Flip the tooltip left near the right edge and down near the top edge."""
    flipped_x = px > frame.width - TOOLTIP_RIGHT_MARGIN
    flipped_y = py < frame.top + TOOLTIP_TOP_MARGIN
    return TooltipPlacement(
        dx=TOOLTIP_FLIPPED_OFFSET_X if flipped_x else TOOLTIP_OFFSET_X,
        dy=TOOLTIP_FLIPPED_OFFSET_Y if flipped_y else TOOLTIP_OFFSET_Y,
        flipped_x=flipped_x,
        flipped_y=flipped_y,
    )


def resolve_hover(
    pointer_fraction: float,
    series_set: SeriesSet,
    mapper: Optional[CoordinateMapper] = None,
    *,
    x_axis_mode: XAxisMode = XAxisMode.AGE,
    current_age: float = 0,
) -> Optional[HoverResult]:
    """Resolve a pointer position to the sampled values under it.

    Without a mapper the pixel position is computed on a linear axis fitted
    to the data. Returns None when there is nothing to hover over.
    """
    anchor = series_set.anchor
    if not anchor:
        return None

    index = sample_index(pointer_fraction, len(anchor))
    anchor_point = anchor[index]

    values: List[HoverValue] = []
    for position, series in enumerate(series_set.balances):
        if not series:
            continue
        point = series[min(index, len(series) - 1)]
        rate = series_set.rates[position] if position < len(series_set.rates) else None
        values.append(HoverValue(series=position, rate=rate, y=point.y))

    contributions = series_set.contributions
    contrib = contributions[min(index, len(contributions) - 1)].y if contributions else None

    if mapper is None:
        mapper = CoordinateMapper.for_series(
            series_set, build_axis_scale(ScaleMode.LINEAR, series_set.y_peak())
        )
    frame = mapper.frame
    t = clamp(pointer_fraction, 0.0, 1.0) if math.isfinite(pointer_fraction) else 0.0
    px = clamp(frame.left + t * frame.inner_width, frame.left, frame.right)
    py = clamp(mapper.y_to_px(anchor_point.y), frame.top, frame.bottom)

    prefix = "Age" if XAxisMode(x_axis_mode) is XAxisMode.AGE else "Year"
    return HoverResult(
        index=index,
        x=anchor_point.x,
        label=f"{prefix} {x_axis_label(anchor_point.x, x_axis_mode, current_age)}",
        values=values,
        contrib=contrib,
        px=px,
        py=py,
        tooltip=place_tooltip(px, py, frame),
    )


__all__ = [
    "TooltipPlacement",
    "HoverValue",
    "HoverResult",
    "sample_index",
    "place_tooltip",
    "resolve_hover",
]
