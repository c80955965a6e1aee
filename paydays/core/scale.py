"""Y-axis scales and gridline ticks for the balance chart.

Linear axes use "nice" steps (1, 2, 5 or 10 times a power of ten). Log axes
use ``log10(y + 1)`` so a zero balance sits on the baseline instead of at
minus infinity. All functions return finite values for any input.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import List, Tuple

from paydays.core.base import ValueModel
from paydays.core.numbers import nice_round_up

MAX_LOG_TICKS = 7
LOG_BASES = (1, 2, 5)


class ScaleMode(str, Enum):
    LINEAR = "linear"
    LOG = "log"


class AxisScale(ValueModel):
    mode: ScaleMode
    max: float
    ticks: Tuple[float, ...]


def nice_step(span: float, target_ticks: int) -> float:
    if not math.isfinite(span) or span <= 0:
        return 1.0
    return nice_round_up(span / max(1, target_ticks))


def nice_ceil(n: float) -> float:
    return nice_round_up(n)


def pick_ticks(min_value: float, max_value: float, target_ticks: int = 4) -> List[float]:
    """Linear ticks from 0 up to (at least) the nice ceiling of ``max_value``.

    A degenerate range yields just the baseline tick ``[0.0]``.
    """
    if not (math.isfinite(min_value) and math.isfinite(max_value)) or max_value <= min_value:
        return [0.0]

    step = nice_step(max_value - min_value, target_ticks)
    nice_max = max(step, nice_ceil(max_value))
    count = math.floor(nice_max / step + 0.5)
    ticks = (i * step for i in range(count + 1))
    return [tick for tick in ticks if math.isfinite(tick)]


def _thin(ticks: List[float]) -> List[float]:
    # keep first and last, drop every other interior tick
    interior = ticks[1:-1]
    return [ticks[0], *interior[::2], ticks[-1]]


def make_log_ticks(max_value: float) -> List[float]:
    """Gridlines at 1/2/5 x 10^k, plus 0 and the axis maximum itself."""
    top = max(1.0, max_value) if math.isfinite(max_value) else 1.0

    ticks = [0.0]
    for power in range(int(math.floor(math.log10(top))) + 1):
        for base in LOG_BASES:
            value = base * 10**power
            if value <= top:
                ticks.append(float(value))
    if ticks[-1] != top:
        ticks.append(top)

    unique = sorted(set(ticks))
    while len(unique) > MAX_LOG_TICKS:
        unique = _thin(unique)
    return unique


def log_t(y: float) -> float:
    value = max(0.0, y) if math.isfinite(y) else 0.0
    return math.log10(value + 1.0)


def log_fraction(y: float, y_max: float) -> float:
    """Vertical position of ``y`` on a log axis topped at ``y_max`` (0 = baseline)."""
    denom = log_t(y_max) or 1.0
    return log_t(y) / denom


def build_axis_scale(mode: ScaleMode, y_max: float, target_ticks: int = 3) -> AxisScale:
    top = max(1.0, y_max) if math.isfinite(y_max) else 1.0
    if ScaleMode(mode) is ScaleMode.LOG:
        ticks = make_log_ticks(top)
    else:
        ticks = pick_ticks(0.0, top, target_ticks)
    return AxisScale(mode=mode, max=top, ticks=tuple(ticks))


__all__ = [
    "MAX_LOG_TICKS",
    "ScaleMode",
    "AxisScale",
    "nice_step",
    "nice_ceil",
    "pick_ticks",
    "make_log_ticks",
    "log_t",
    "log_fraction",
    "build_axis_scale",
]
