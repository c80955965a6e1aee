from __future__ import annotations

import math

import pytest

from paydays.core.sampling import Sampler, retained_indices, sample_stride


def test_keep_all_when_max_points_is_zero_or_missing():
    assert sample_stride(780, 0) == 1
    assert sample_stride(780, None) == 1
    assert sample_stride(780, math.inf) == 1
    assert retained_indices(12, 0) == list(range(13))


def test_biweekly_thirty_years_keeps_every_fourth_payday():
    indices = retained_indices(780, 240)

    assert sample_stride(780, 240) == 4
    assert indices == list(range(0, 781, 4))
    assert len(indices) == 196
    assert indices[-1] == 780


def test_last_payday_is_kept_even_off_stride():
    indices = retained_indices(14600, 240)

    assert sample_stride(14600, 240) == 61
    assert indices[0] == 0
    assert indices[-1] == 14600
    assert 14600 % 61 != 0


@pytest.mark.parametrize("total", [0, 1, 7, 239, 240, 241, 780, 1820, 14600])
@pytest.mark.parametrize("max_points", [1, 10, 240])
def test_retained_count_is_bounded(total, max_points):
    sampler = Sampler.for_periods(total, max_points)
    indices = retained_indices(total, max_points)

    assert indices[0] == 0
    assert indices[-1] == total
    assert len(indices) <= sampler.max_retained
    assert all(b > a for a, b in zip(indices, indices[1:]))
