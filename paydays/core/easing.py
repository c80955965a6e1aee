"""Axis-scale easing for the chart's vertical extent.

The displayed maximum grows immediately when the data needs more room (data
must never be clipped) but shrinks only gradually, so the axis does not jump
around while someone is typing. Bumping the reset token forces an immediate
refit.

States: uninitialized (``display_max == 0``) and tracking. The transition
function is pure; callers keep the returned state for the next cycle.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterable

from paydays.core.numbers import nice_round_up
from paydays.core.projection import ProjectionResult

# below this share of the current max the axis relaxes faster
FAST_EASE_THRESHOLD = 0.75
FAST_EASE_FACTOR = 0.96
SLOW_EASE_FACTOR = 0.985


@dataclass(frozen=True)
class AxisEasingState:
    display_max: float = 0.0
    reset_token: int = 0

    @property
    def initialized(self) -> bool:
        return self.display_max > 0


def step_display_max(state: AxisEasingState, computed_max: float, reset_token: int) -> AxisEasingState:
    """Advance the easing state by one recomputation cycle."""
    if not math.isfinite(computed_max) or computed_max <= 0:
        computed_max = 1.0

    if reset_token != state.reset_token:
        return AxisEasingState(display_max=computed_max, reset_token=reset_token)

    previous = state.display_max
    if not state.initialized or computed_max >= previous:
        return replace(state, display_max=computed_max)

    if computed_max < previous * FAST_EASE_THRESHOLD:
        return replace(state, display_max=max(computed_max, previous * FAST_EASE_FACTOR))
    return replace(state, display_max=max(computed_max, previous * SLOW_EASE_FACTOR))


def computed_y_max(results: Iterable[ProjectionResult]) -> float:
    """Nice-rounded top of every visible balance and contribution series."""
    peak = 1.0
    for result in results:
        values = [result.final_balance]
        for point in result.points:
            values.extend((point.balance, point.total_contrib))
        # an overflowed balance must not collapse the axis
        peak = max([peak, *(v for v in values if math.isfinite(v))])
    return nice_round_up(peak)


__all__ = [
    "FAST_EASE_THRESHOLD",
    "FAST_EASE_FACTOR",
    "SLOW_EASE_FACTOR",
    "AxisEasingState",
    "step_display_max",
    "computed_y_max",
]
