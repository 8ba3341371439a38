"""Tests for SVG rendering."""

import xml.etree.ElementTree as ET

import pytest

from petal_plot.layout.engine import compute_layout
from petal_plot.render.style import get_active_theme
from petal_plot.render.svg import render_svg
from petal_plot.rose import plot_rose
from petal_plot.themes import CLASSIC_THEME, DARK_THEME

WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def _render_simple(**kwargs):
    layout = compute_layout([8, 7, 6, 5, 4, 3.5, 2], labels=WEEKDAYS)
    return render_svg(layout, CLASSIC_THEME, **kwargs)


def _render_two_series(**kwargs):
    layout = compute_layout(
        [10, 12, 9], area2=[11, 10, 10], series_names=("observed", "expected")
    )
    return render_svg(layout, CLASSIC_THEME, **kwargs)


def test_render_produces_valid_svg():
    svg = _render_simple()
    root = ET.fromstring(svg)
    assert root.tag.endswith("svg") or "svg" in root.tag


def test_render_contains_labels_and_stats():
    svg = _render_simple()
    for day in WEEKDAYS:
        assert day in svg
    assert "3.5" in svg


def test_render_one_path_per_wedge():
    svg = _render_simple()
    root = ET.fromstring(svg)
    paths = [el for el in root.iter() if el.tag.endswith("path")]
    assert len(paths) == 7


def test_render_piece_colors():
    svg = _render_two_series()
    assert 'fill="white"' in svg
    assert 'fill="gray"' in svg


def test_render_piece_color_override():
    svg = _render_two_series(piece_colors=("green", "red"))
    assert 'fill="green"' in svg
    assert 'fill="red"' in svg
    assert get_active_theme() is CLASSIC_THEME


def test_render_legend_with_two_series():
    svg = _render_two_series()
    assert "observed" in svg
    assert "expected" in svg


def test_render_legend_disabled():
    svg = _render_two_series(legend=False)
    assert "observed" not in svg


def test_render_no_legend_for_single_series():
    layout = compute_layout([1, 2, 3], series_names=("observed", "expected"))
    svg = render_svg(layout, CLASSIC_THEME, legend=True)
    assert "observed" not in svg


def test_render_legend_labels_and_title():
    svg = _render_two_series(legend_labels=["Obs", "Exp"], legend_title="# players")
    assert "Obs" in svg
    assert "Exp" in svg
    assert "# players" in svg


def test_render_legend_unknown_position():
    with pytest.raises(ValueError, match="legend position"):
        _render_two_series(legend_position="middle")
    assert get_active_theme() is CLASSIC_THEME


def test_render_separators_dotted():
    layout = compute_layout([1, 2, 3], lines=True)
    svg = render_svg(layout, CLASSIC_THEME)
    assert 'stroke-dasharray="2,3"' in svg


def test_render_spokes_color():
    layout = compute_layout([1, 2, 3], spokes=[0.1, 0.2, 0.3])
    svg = render_svg(layout, CLASSIC_THEME, spoke_color="#00ff00")
    assert "#00ff00" in svg


def test_render_captions():
    svg = _render_simple(title="Weekly counts", xlab="Day", ylab="Count")
    assert "Weekly counts" in svg
    assert "Day" in svg
    assert "rotate(-90" in svg


def test_render_dark_theme_background():
    layout = compute_layout([1, 2, 3])
    svg = render_svg(layout, DARK_THEME)
    assert DARK_THEME.background_color in svg


def test_render_size():
    svg = _render_simple(size=300)
    root = ET.fromstring(svg)
    assert root.get("width") == "300"


def test_plot_rose_one_call():
    svg = plot_rose(
        [58, 54, 49, 50], area2=[52, 48, 53, 51],
        labels=["Q1", "Q2", "Q3", "Q4"], dp=0, lines=True,
        piece_colors=["green", "red"], legend_labels=["Obs", "Exp"],
        title="Observed and expected",
    )
    assert "Observed and expected" in svg
    assert 'fill="green"' in svg
    assert "Obs" in svg
    ET.fromstring(svg)


def test_plot_rose_unknown_theme():
    with pytest.raises(KeyError):
        plot_rose([1, 2], theme="neon")
