from __future__ import annotations

from math import inf, isclose, nan

import pytest

from paydays.core.numbers import clamp, clamp_int, nice_round_up, parse_num, round_half_up


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("$1,250.50", 1250.5),
        ("7.5%", 7.5),
        ("-5", -5.0),
        ("12abc", 12.0),
        (42, 42.0),
        (3.25, 3.25),
        ("", 0.0),
        ("abc", 0.0),
        (None, 0.0),
        ("1.2.3", 0.0),
        ("5-3", 0.0),
        (nan, 0.0),
        (inf, 0.0),
    ],
)
def test_parse_num_is_permissive(raw, expected):
    assert parse_num(raw) == expected


def test_round_half_up_matches_calculator_rounding():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(-2.5) == -2
    assert round_half_up(0.49) == 0


def test_clamp_int_rounds_then_clamps():
    assert clamp_int(2.5, 0, 10) == 3
    assert clamp_int(99, 0, 10) == 10
    assert clamp_int(-4, 0, 10) == 0
    assert clamp_int(nan, 1, 5) == 1
    assert clamp_int("not a number", 1, 5) == 1
    assert clamp(20.0, 1.0, 15.0) == 15.0


@pytest.mark.parametrize(
    "value, expected",
    [(0, 1), (-5, 1), (nan, 1), (1, 1), (1.5, 2), (3, 5), (7, 10), (1000, 1000), (1234, 2000), (0.03, 0.05)],
)
def test_nice_round_up(value, expected):
    assert isclose(nice_round_up(value), expected)


def test_nice_round_up_never_overflows():
    assert nice_round_up(1.7e308) == 1.7e308
    assert isclose(nice_round_up(1.5e307), 2e307)
