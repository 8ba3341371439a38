"""One-call rose diagram: lay out a series and render it to SVG."""

from __future__ import annotations

from collections.abc import Sequence

from petal_plot.layout.constants import DEFAULT_CENTER_INSET, DEFAULT_DP, DEFAULT_SCALE
from petal_plot.layout.engine import compute_layout
from petal_plot.render.constants import CANVAS_SIZE
from petal_plot.render.svg import render_svg
from petal_plot.themes import THEMES


def plot_rose(
    area1: Sequence[float],
    area2: Sequence[float] | None = None,
    spokes: Sequence[float] | None = None,
    scale: float = DEFAULT_SCALE,
    labels: Sequence[str] | None = None,
    stats: bool = True,
    dp: int = DEFAULT_DP,
    clockwise: bool = True,
    spoke_color: str | None = None,
    lines: bool = False,
    center_inset: float = DEFAULT_CENTER_INSET,
    piece_colors: Sequence[str] | None = None,
    length: bool = False,
    legend: bool | None = None,
    legend_labels: Sequence[str] | None = None,
    legend_fill: Sequence[str] | None = None,
    legend_title: str = "",
    legend_position: str = "bottomright",
    title: str = "",
    xlab: str = "",
    ylab: str = "",
    theme: str = "classic",
    size: int = CANVAS_SIZE,
    series_names: tuple[str, str] = ("area1", "area2"),
) -> str:
    """Draw a circular plot of ``area1`` (and optionally ``area2``) as SVG.

    Petal areas are proportional to the values, or petal lengths when
    ``length`` is true. Useful for spotting the shape of seasonal patterns
    such as monthly or weekly counts. ``spokes`` overlays per-bin
    uncertainty (e.g. standard errors) and ``lines`` adds dotted separators
    between petals.

    >>> import calendar
    >>> svg = plot_rose(range(1, 13), scale=0.7,
    ...                 labels=calendar.month_abbr[1:], dp=0)
    """
    layout = compute_layout(
        area1,
        area2=area2,
        spokes=spokes,
        scale=scale,
        clockwise=clockwise,
        center_inset=center_inset,
        length_mode=length,
        labels=labels,
        stats=stats,
        dp=dp,
        lines=lines,
        series_names=series_names,
    )
    return render_svg(
        layout,
        THEMES[theme],
        size=size,
        title=title,
        xlab=xlab,
        ylab=ylab,
        legend=legend,
        legend_labels=legend_labels,
        legend_fill=legend_fill,
        legend_title=legend_title,
        legend_position=legend_position,
        piece_colors=tuple(piece_colors) if piece_colors else None,
        spoke_color=spoke_color,
    )
