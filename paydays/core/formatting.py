"""Display formatting for money, counts and rates."""

from __future__ import annotations

import math

from paydays.core.numbers import round_half_up


def _strip_zero_decimal(text: str) -> str:
    return text[:-2] if text.endswith(".0") else text


def format_currency(value: float) -> str:
    if not math.isfinite(value):
        return "$0"
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_plain_number(value: float, digits: int = 0) -> str:
    if not math.isfinite(value):
        return "0"
    return f"{value:,.{digits}f}"


def format_axis_money(value: float) -> str:
    """Compact axis label: $950, $12K, $1.5M, $2B."""
    if not math.isfinite(value):
        return "$0"
    magnitude = abs(value)
    sign = "-" if value < 0 else ""
    if magnitude >= 1_000_000_000:
        return f"{sign}${_strip_zero_decimal(f'{magnitude / 1_000_000_000:.1f}')}B"
    if magnitude >= 1_000_000:
        return f"{sign}${_strip_zero_decimal(f'{magnitude / 1_000_000:.1f}')}M"
    if magnitude >= 1_000:
        return f"{sign}${round_half_up(magnitude / 1_000)}K"
    return format_currency(value)


def format_rate(rate_pct: float) -> str:
    if not math.isfinite(rate_pct):
        return ""
    return f"{_strip_zero_decimal(f'{rate_pct:.1f}')}%"


__all__ = ["format_currency", "format_plain_number", "format_axis_money", "format_rate"]
