"""Tests for label placement and statistic formatting."""

import math

import pytest

from petal_plot.errors import RoseDataError
from petal_plot.layout.labels import bisector_angle, format_stat, place_labels


def test_format_stat_decimal_places():
    assert format_stat(3.14159, 1) == "3.1"
    assert format_stat(3.14159, 3) == "3.142"
    assert format_stat(12.0, 0) == "12"


def test_bisector_angle_first_bin():
    assert bisector_angle(0, 4) == pytest.approx(math.pi / 2 + math.pi / 4)


def test_labels_with_stats():
    placements = place_labels(["Mon", "Tue"], [8.0, 7.25], 2, stats=True, dp=1)
    assert [p.text for p in placements] == ["Mon\n8.0", "Tue\n7.2"]
    assert placements[0].lines == ["Mon", "8.0"]
    assert all(p.radius == 0.86 for p in placements)


def test_labels_without_stats():
    placements = place_labels(["Mon", "Tue"], [8.0, 7.0], 2, stats=False)
    assert [p.text for p in placements] == ["Mon", "Tue"]
    assert all(p.radius == 0.92 for p in placements)
    for p in placements:
        assert math.hypot(p.x, p.y) == pytest.approx(0.92)


def test_clockwise_first_label_on_right():
    cw = place_labels(["a", "b", "c", "d"], [1, 2, 3, 4], 4, clockwise=True)
    acw = place_labels(["a", "b", "c", "d"], [1, 2, 3, 4], 4, clockwise=False)
    assert cw[0].x > 0
    assert acw[0].x < 0
    assert cw[0].y == pytest.approx(acw[0].y)


def test_too_few_labels():
    with pytest.raises(RoseDataError):
        place_labels(["a"], [1, 2], 2)


def test_extra_labels_ignored():
    placements = place_labels(["a", "b", "c"], [1, 2], 2, stats=False)
    assert [p.text for p in placements] == ["a", "b"]
