"""Chart sampling: keep a bounded number of projection points.

Daily saving over 40 years is 14,600 paydays (three times that in compare
mode). Charts only need a few hundred points, so the simulator keeps every
``stride``-th payday plus the first and the last. Totals are never derived
from the sampled points, so sampling cannot change reported figures.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional


def sample_stride(total_periods: int, max_points: Optional[float]) -> int:
    """Stride between kept paydays; 1 means keep everything."""
    if max_points is None or not math.isfinite(max_points) or max_points <= 0:
        return 1
    if total_periods <= 0:
        return 1
    return max(1, math.ceil(total_periods / max_points))


@dataclass(frozen=True)
class Sampler:
    total_periods: int
    stride: int

    @classmethod
    def for_periods(cls, total_periods: int, max_points: Optional[float]) -> "Sampler":
        return cls(total_periods=total_periods, stride=sample_stride(total_periods, max_points))

    def keeps(self, index: int) -> bool:
        return index == 0 or index == self.total_periods or index % self.stride == 0

    @property
    def max_retained(self) -> int:
        return self.total_periods // self.stride + 2


def retained_indices(total_periods: int, max_points: Optional[float]) -> List[int]:
    sampler = Sampler.for_periods(total_periods, max_points)
    return [i for i in range(total_periods + 1) if sampler.keeps(i)]


__all__ = ["sample_stride", "Sampler", "retained_indices"]
