from __future__ import annotations

import math

from paydays.core.chart import (
    DEFAULT_FRAME,
    CoordinateMapper,
    SeriesPoint,
    SeriesSet,
    XAxisMode,
    build_chart,
    clean_series,
    x_axis_label,
)
from paydays.core.scale import ScaleMode, build_axis_scale


def straight_line() -> SeriesSet:
    points = (SeriesPoint(0, 0), SeriesPoint(1, 50), SeriesPoint(2, 100))
    return SeriesSet(balances=(points,), contributions=points, rates=(7.0,))


def test_frame_padding():
    assert DEFAULT_FRAME.left == 56
    assert DEFAULT_FRAME.right == 900
    assert DEFAULT_FRAME.top == 18
    assert DEFAULT_FRAME.bottom == 318
    assert DEFAULT_FRAME.inner_width == 844
    assert DEFAULT_FRAME.inner_height == 300


def test_straight_line_geometry():
    chart = build_chart(straight_line())

    assert not chart.empty
    assert chart.scale.ticks == (0, 50, 100)
    assert chart.lines == ["M 56.00 318.00 L 478.00 168.00 L 900.00 18.00"]
    assert chart.end_dot.x == 900
    assert chart.end_dot.y == 18
    assert chart.baseline == 318
    assert [g.label for g in chart.y_grid] == ["$0", "$50", "$100"]
    assert [g.position for g in chart.y_grid] == [318, 168, 18]
    assert chart.area.endswith("L 900.00 318.00 L 56.00 318.00 Z")
    assert chart.contributions == chart.lines[0]


def test_x_axis_labels_follow_the_axis_mode():
    by_age = build_chart(straight_line(), x_axis_mode=XAxisMode.AGE, current_age=30)
    by_year = build_chart(straight_line(), x_axis_mode=XAxisMode.YEARS, current_age=30)

    assert [g.label for g in by_age.x_grid] == ["30", "31", "32"]
    assert [g.label for g in by_year.x_grid] == ["0", "1", "2"]
    assert [g.position for g in by_year.x_grid] == [56, 478, 900]
    assert x_axis_label(2.5, XAxisMode.YEARS) == "3"


def test_override_sets_the_axis_top():
    chart = build_chart(straight_line(), y_max_override=200)

    assert chart.scale.max == 200
    assert chart.end_dot.y == 168


def test_log_scale_puts_zero_on_the_baseline():
    chart = build_chart(straight_line(), scale_mode=ScaleMode.LOG)

    assert chart.scale.mode is ScaleMode.LOG
    assert chart.lines[0].startswith("M 56.00 318.00")
    assert chart.end_dot.y == 18


def test_compare_mode_draws_three_lines_without_area():
    low = (SeriesPoint(0, 0), SeriesPoint(1, 40))
    base = (SeriesPoint(0, 0), SeriesPoint(1, 50))
    high = (SeriesPoint(0, 0), SeriesPoint(1, 60))
    chart = build_chart(SeriesSet(balances=(low, base, high), contributions=base, rates=(5, 7, 9)))

    assert len(chart.lines) == 3
    assert chart.area is None
    assert chart.end_dot is None


def test_non_finite_points_are_dropped():
    cleaned = clean_series([SeriesPoint(0, 1), SeriesPoint(math.nan, 2), SeriesPoint(1, math.inf)])

    assert cleaned == (SeriesPoint(0, 1),)


def test_nothing_to_draw_returns_an_empty_chart():
    chart = build_chart(SeriesSet(balances=(clean_series([SeriesPoint(math.nan, 1)]),)))

    assert chart.empty
    assert chart.lines == []
    assert chart.width == 920
    assert chart.height == 360


def test_single_point_maps_to_the_left_edge():
    series_set = SeriesSet(balances=((SeriesPoint(0, 500),),))
    mapper = CoordinateMapper.for_series(series_set, build_axis_scale(ScaleMode.LINEAR, 1000))

    assert mapper.x_to_px(0) == 56
    assert mapper.y_to_px(500) == 168
    assert build_chart(series_set).contributions is None


def test_mapper_keeps_pixels_inside_the_frame():
    series_set = straight_line()
    mapper = CoordinateMapper.for_series(series_set, build_axis_scale(ScaleMode.LINEAR, 1))

    assert mapper.y_to_px(1e308) == DEFAULT_FRAME.top
    assert mapper.y_to_px(-50) == DEFAULT_FRAME.bottom
    assert mapper.y_to_px(math.inf) == DEFAULT_FRAME.bottom
    assert mapper.x_to_px(99) == DEFAULT_FRAME.right
    assert mapper.x_to_px(math.nan) == DEFAULT_FRAME.left


def test_y_peak_ignores_non_finite_values():
    raw = (SeriesPoint(0, 10.0), SeriesPoint(1, math.inf), SeriesPoint(2, math.nan))

    assert SeriesSet(balances=(raw,)).y_peak() == 10.0
