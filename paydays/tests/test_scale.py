from __future__ import annotations

import math
from math import isclose

import pytest

from paydays.core.scale import (
    MAX_LOG_TICKS,
    ScaleMode,
    build_axis_scale,
    log_fraction,
    log_t,
    make_log_ticks,
    pick_ticks,
)


def test_pick_ticks_uses_nice_steps_from_zero():
    assert pick_ticks(0, 1000, 3) == [0, 500, 1000]
    assert pick_ticks(0, 1234, 3) == [0, 500, 1000, 1500, 2000]
    assert pick_ticks(0, 1, 4) == [0, 0.5, 1.0]


@pytest.mark.parametrize("low,high", [(5, 5), (10, 2), (0, math.nan), (math.inf, 1)])
def test_pick_ticks_degenerate_range_keeps_only_the_baseline(low, high):
    assert pick_ticks(low, high) == [0.0]


@pytest.mark.parametrize("top", [1, 7, 99, 1234, 86_000, 2_500_000])
def test_pick_ticks_always_covers_the_maximum(top):
    ticks = pick_ticks(0, top, 3)

    assert ticks[0] == 0
    assert ticks[-1] >= top
    steps = {round(b - a, 9) for a, b in zip(ticks, ticks[1:])}
    assert len(steps) == 1


def test_log_ticks_include_zero_and_the_maximum():
    assert make_log_ticks(50) == [0, 1, 2, 5, 10, 20, 50]
    assert make_log_ticks(30) == [0, 1, 2, 5, 10, 20, 30]


def test_log_ticks_are_thinned_to_seven():
    assert make_log_ticks(100) == [0, 1, 5, 20, 100]

    ticks = make_log_ticks(3_750_000)
    assert len(ticks) <= MAX_LOG_TICKS
    assert ticks[0] == 0
    assert ticks[-1] == 3_750_000
    assert ticks == sorted(set(ticks))


@pytest.mark.parametrize("top", [0, 1, -10, math.nan, math.inf])
def test_log_ticks_for_tiny_or_broken_maximum(top):
    assert make_log_ticks(top) == [0, 1]


def test_log_transform_keeps_zero_on_the_baseline():
    assert log_t(0) == 0
    assert log_t(-50) == 0
    assert log_t(math.nan) == 0
    assert isclose(log_t(99), 2.0)
    assert log_fraction(0, 1000) == 0
    assert isclose(log_fraction(999, 999), 1.0)
    # a zero maximum must not divide by zero
    assert log_fraction(10, 0) == log_t(10)


def test_build_axis_scale_floors_the_maximum_at_one():
    linear = build_axis_scale(ScaleMode.LINEAR, 0.25)
    log = build_axis_scale(ScaleMode.LOG, math.nan)

    assert linear.max == 1
    assert linear.ticks[-1] >= 1
    assert log.max == 1
    assert log.ticks == (0, 1)


def test_build_axis_scale_accepts_mode_strings():
    scale = build_axis_scale("log", 50)

    assert scale.mode is ScaleMode.LOG
    assert scale.ticks == (0, 1, 2, 5, 10, 20, 50)


def test_ticks_near_the_float_limit_stay_finite():
    top = 1.7e308

    linear = pick_ticks(0, top, 3)
    log = make_log_ticks(top)

    assert linear[0] == 0
    assert all(math.isfinite(t) for t in linear)
    assert log[0] == 0
    assert log[-1] == top
    assert len(log) <= MAX_LOG_TICKS
    assert all(math.isfinite(t) for t in log)
