"""Numeric helpers shared by the projection and chart code.

Everything here is total: malformed or non-finite input collapses to a safe
value instead of raising.
"""

from __future__ import annotations

import math
import re
from typing import Any

_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def parse_num(value: Any) -> float:
    """Permissive number parser for form fields.

    Strips every character that is not a digit, "." or "-", so "$1,250.50"
    reads as 1250.5. Anything that still fails to parse is 0.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0
    if value is None:
        return 0.0

    cleaned = _NON_NUMERIC.sub("", str(value))
    if not cleaned:
        return 0.0
    try:
        number = float(cleaned)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def clamp(n: float, low: float, high: float) -> float:
    return min(high, max(low, n))


def round_half_up(n: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(n + 0.5)


def clamp_int(n: Any, low: int, high: int) -> int:
    """Round then clamp; non-numeric or non-finite input yields ``low``."""
    try:
        number = float(n)
    except (TypeError, ValueError):
        return low
    if not math.isfinite(number):
        return low
    return int(min(high, max(low, round_half_up(number))))


def nice_round_up(n: float) -> float:
    """Snap ``n`` up to the nearest 1, 2, 5 or 10 times a power of ten."""
    if not math.isfinite(n) or n <= 0:
        return 1.0
    power = 10.0 ** math.floor(math.log10(n))
    scaled = n / power
    if scaled <= 1:
        nice = 1
    elif scaled <= 2:
        nice = 2
    elif scaled <= 5:
        nice = 5
    else:
        nice = 10
    rounded = nice * power
    # the next step up can overflow near the float limit
    return rounded if math.isfinite(rounded) else n


__all__ = [
    "parse_num",
    "clamp",
    "round_half_up",
    "clamp_int",
    "nice_round_up",
]
