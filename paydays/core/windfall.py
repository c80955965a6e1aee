"""Windfall timing: turn a user's "when" choice into a concrete payday index.

Payday indexes are 1-based (payday 1 is the first contribution). Every
resolved index is clamped into ``[1, total_periods]`` so a windfall can never
land outside the projection.
"""

from __future__ import annotations

import math
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from paydays.core.numbers import clamp_int

MAX_YEARS_AHEAD = 80


class NoWindfall(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"


class NextPayday(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["now"] = "now"


class AtYear(BaseModel):
    """Deposit at the last payday of year ``year`` (1-based, clamped to 1..80)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["year"] = "year"
    year: float = 1


class AtAge(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["age"] = "age"
    age: float


class AtPaydayIndex(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["payday"] = "payday"
    payday: float = 1


WindfallPolicy = Annotated[
    Union[NoWindfall, NextPayday, AtYear, AtAge, AtPaydayIndex],
    Field(discriminator="kind"),
]


def resolve_windfall_period(
    policy: Optional[WindfallPolicy],
    *,
    amount: float,
    current_age: int,
    periods_per_year: int,
    total_periods: int,
) -> Optional[int]:
    """Return the payday index that receives the windfall, or None for no windfall."""
    if policy is None or isinstance(policy, NoWindfall):
        return None
    if not math.isfinite(amount) or amount <= 0:
        return None
    if total_periods <= 0:
        return None

    if isinstance(policy, NextPayday):
        return 1

    if isinstance(policy, AtYear):
        year = clamp_int(policy.year, 1, MAX_YEARS_AHEAD)
        return clamp_int(year * periods_per_year, 1, total_periods)

    if isinstance(policy, AtAge):
        target_age = clamp_int(policy.age, current_age, current_age + MAX_YEARS_AHEAD)
        years_from_now = max(0, target_age - current_age)
        return clamp_int(years_from_now * periods_per_year, 1, total_periods)

    if isinstance(policy, AtPaydayIndex):
        return clamp_int(policy.payday, 1, total_periods)

    return None


__all__ = [
    "MAX_YEARS_AHEAD",
    "NoWindfall",
    "NextPayday",
    "AtYear",
    "AtAge",
    "AtPaydayIndex",
    "WindfallPolicy",
    "resolve_windfall_period",
]
