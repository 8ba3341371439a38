"""SVG generation for rose diagrams using drawsvg."""

from __future__ import annotations

from collections.abc import Sequence

import drawsvg as draw

from petal_plot.parser.model import LabelAnchor, Point, RoseLayout, Segment, Wedge
from petal_plot.render.constants import (
    AXIS_LABEL_GAP,
    CANVAS_PADDING,
    CANVAS_SIZE,
    LABEL_LINE_HEIGHT,
    TITLE_Y,
)
from petal_plot.render.legend import compute_legend_dimensions, legend_origin, render_legend
from petal_plot.render.style import Theme, theme_context


class _Canvas:
    """Maps unit circle coordinates onto the square drawing (y up to y down)."""

    def __init__(self, size: int, padding: float = CANVAS_PADDING) -> None:
        self.size = size
        self.center = size / 2
        self.radius = max(size / 2 - padding, 1.0)

    def point(self, p: Point) -> tuple[float, float]:
        return (self.center + p[0] * self.radius, self.center - p[1] * self.radius)

    def flat(self, points: Sequence[Point]) -> list[float]:
        coords: list[float] = []
        for p in points:
            coords.extend(self.point(p))
        return coords


def render_svg(
    layout: RoseLayout,
    theme: Theme | None = None,
    *,
    size: int = CANVAS_SIZE,
    title: str = "",
    xlab: str = "",
    ylab: str = "",
    legend: bool | None = None,
    legend_labels: Sequence[str] | None = None,
    legend_fill: Sequence[str] | None = None,
    legend_title: str = "",
    legend_position: str = "bottomright",
    **style_overrides,
) -> str:
    """Render a computed rose layout to an SVG string.

    ``style_overrides`` replace theme fields (``piece_colors``,
    ``spoke_color``, ...) for this call only. The legend defaults to on
    when the layout has a secondary series and is never drawn without one.
    """
    with theme_context(theme, **style_overrides) as active:
        canvas = _Canvas(size)
        d = draw.Drawing(size, size)

        d.append(draw.Rectangle(0, 0, size, size, fill=active.background_color))

        _render_frame(d, canvas, active)
        _render_wedges(d, canvas, layout.primary, active.piece_colors[0], active)
        _render_wedges(d, canvas, layout.secondary, active.piece_colors[1], active)
        _render_labels(d, canvas, layout.labels, active)
        _render_segments(
            d, canvas, layout.spokes,
            stroke=active.spoke_color,
            stroke_width=active.spoke_width,
        )
        _render_segments(
            d, canvas, layout.separators,
            stroke=active.separator_color,
            stroke_width=active.separator_width,
            stroke_dasharray=active.separator_dasharray,
        )

        show_legend = layout.has_secondary if legend is None else legend
        if show_legend and layout.has_secondary:
            labels = list(legend_labels) if legend_labels else list(layout.series_names)
            fills = list(legend_fill) if legend_fill else list(active.piece_colors)
            dims = compute_legend_dimensions(labels, active, legend_title)
            x, y = legend_origin(legend_position, dims, (size, size))
            render_legend(d, labels, fills, active, x, y, title=legend_title)

        _render_captions(d, size, active, title, xlab, ylab)

        return d.as_svg()


def _render_frame(d: draw.Drawing, canvas: _Canvas, theme: Theme) -> None:
    """Unit circle outline around the petals."""
    d.append(draw.Circle(
        canvas.center, canvas.center, canvas.radius,
        fill="none",
        stroke=theme.frame_stroke,
        stroke_width=theme.frame_stroke_width,
    ))


def _render_wedges(
    d: draw.Drawing,
    canvas: _Canvas,
    wedges: list[Wedge],
    fill: str,
    theme: Theme,
) -> None:
    for wedge in wedges:
        d.append(draw.Lines(
            *canvas.flat(wedge.points),
            close=True,
            fill=fill,
            stroke=theme.wedge_stroke,
            stroke_width=theme.wedge_stroke_width,
            stroke_linejoin="round",
        ))


def _render_segments(
    d: draw.Drawing,
    canvas: _Canvas,
    segments: list[Segment],
    **style,
) -> None:
    for seg in segments:
        sx, sy = canvas.point(seg.start)
        ex, ey = canvas.point(seg.end)
        d.append(draw.Line(sx, sy, ex, ey, **style))


def _render_labels(
    d: draw.Drawing,
    canvas: _Canvas,
    labels: list[LabelAnchor],
    theme: Theme,
) -> None:
    """Render bin labels, centred on their anchors."""
    for label in labels:
        x, y = canvas.point((label.x, label.y))
        d.append(draw.Text(
            label.lines,
            theme.label_font_size,
            x, y,
            center=True,
            line_height=LABEL_LINE_HEIGHT,
            fill=theme.label_color,
            font_family=theme.label_font_family,
        ))


def _render_captions(
    d: draw.Drawing,
    size: int,
    theme: Theme,
    title: str,
    xlab: str,
    ylab: str,
) -> None:
    """Title across the top, x caption below, y caption rotated on the left."""
    if title:
        d.append(draw.Text(
            title,
            theme.title_font_size,
            size / 2, TITLE_Y,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
            text_anchor="middle",
        ))
    if xlab:
        d.append(draw.Text(
            xlab,
            theme.axis_label_font_size,
            size / 2, size - AXIS_LABEL_GAP,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
        ))
    if ylab:
        x = AXIS_LABEL_GAP + theme.axis_label_font_size
        y = size / 2
        d.append(draw.Text(
            ylab,
            theme.axis_label_font_size,
            x, y,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
            transform=f"rotate(-90, {x}, {y})",
        ))
