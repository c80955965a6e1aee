"""Supported savings cadences."""

from __future__ import annotations

from typing import Dict, List, Optional

from paydays.core.base import ValueModel


class PayFrequency(ValueModel):
    key: str
    label: str
    periods: int
    noun: str


PAY_FREQUENCIES: List[PayFrequency] = [
    PayFrequency(key="daily", label="Daily (365)", periods=365, noun="day"),
    PayFrequency(key="weekly", label="Weekly (52)", periods=52, noun="weekly paycheck"),
    PayFrequency(key="biweekly", label="Biweekly (26)", periods=26, noun="biweekly paycheck"),
    PayFrequency(key="monthly", label="Monthly (12)", periods=12, noun="monthly paycheck"),
]

_BY_KEY: Dict[str, PayFrequency] = {freq.key: freq for freq in PAY_FREQUENCIES}

DEFAULT_PERIODS_PER_YEAR = 12


def find_frequency(key: Optional[str]) -> Optional[PayFrequency]:
    if not isinstance(key, str):
        return None
    return _BY_KEY.get(key)


def periods_per_year(key: Optional[str]) -> int:
    """Map a frequency key to paydays per year; unknown keys fall back to monthly."""
    freq = find_frequency(key)
    return freq.periods if freq else DEFAULT_PERIODS_PER_YEAR


def payday_noun(key: Optional[str]) -> str:
    freq = find_frequency(key)
    return freq.noun if freq else "paycheck"


__all__ = [
    "PayFrequency",
    "PAY_FREQUENCIES",
    "DEFAULT_PERIODS_PER_YEAR",
    "find_frequency",
    "periods_per_year",
    "payday_noun",
]
