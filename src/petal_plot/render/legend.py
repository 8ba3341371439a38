"""Legend generation for rose diagram SVGs."""

from __future__ import annotations

from collections.abc import Sequence

import drawsvg as draw

from petal_plot.render.constants import (
    LEGEND_BORDER_RADIUS,
    LEGEND_CHAR_WIDTH_RATIO,
    LEGEND_INSET,
    LEGEND_LINE_HEIGHT,
    LEGEND_PADDING,
    LEGEND_POSITIONS,
    LEGEND_SWATCH_SIZE,
    LEGEND_TEXT_GAP,
)
from petal_plot.render.style import Theme


def compute_legend_dimensions(
    labels: Sequence[str],
    theme: Theme,
    title: str = "",
) -> tuple[float, float]:
    """Compute the width and height of the legend without rendering it.

    Returns (width, height). Returns (0, 0) if there are no entries.
    """
    if not labels:
        return (0.0, 0.0)

    char_width = theme.legend_font_size * LEGEND_CHAR_WIDTH_RATIO
    text_offset = LEGEND_SWATCH_SIZE + LEGEND_TEXT_GAP
    entries_width = text_offset + max(len(str(s)) for s in labels) * char_width
    title_width = len(title) * char_width

    rows = len(labels) + (1 if title else 0)
    width = LEGEND_PADDING * 2 + max(entries_width, title_width)
    height = LEGEND_PADDING * 2 + rows * LEGEND_LINE_HEIGHT
    return (width, height)


def legend_origin(
    position: str,
    legend_size: tuple[float, float],
    canvas_size: tuple[float, float],
) -> tuple[float, float]:
    """Top-left corner of a legend placed in a named canvas corner."""
    if position not in LEGEND_POSITIONS:
        raise ValueError(
            f"Unknown legend position '{position}' "
            f"(expected one of: {', '.join(LEGEND_POSITIONS)})"
        )
    w, h = legend_size
    canvas_w, canvas_h = canvas_size
    x = LEGEND_INSET if position.endswith("left") else canvas_w - w - LEGEND_INSET
    y = LEGEND_INSET if position.startswith("top") else canvas_h - h - LEGEND_INSET
    return (x, y)


def render_legend(
    drawing: draw.Drawing,
    labels: Sequence[str],
    fills: Sequence[str],
    theme: Theme,
    x: float,
    y: float,
    title: str = "",
) -> None:
    """Render a legend of fill swatches, positioned at (x, y), drawing downward."""
    if not labels:
        return

    legend_width, legend_height = compute_legend_dimensions(labels, theme, title)

    drawing.append(
        draw.Rectangle(
            x,
            y,
            legend_width,
            legend_height,
            rx=LEGEND_BORDER_RADIUS,
            ry=LEGEND_BORDER_RADIUS,
            fill=theme.legend_background,
            stroke=theme.legend_stroke,
            stroke_width=1.0,
        )
    )

    row = 0
    if title:
        drawing.append(
            draw.Text(
                title,
                theme.legend_font_size,
                x + legend_width / 2,
                y + LEGEND_PADDING + LEGEND_LINE_HEIGHT / 2,
                fill=theme.legend_text_color,
                font_family=theme.label_font_family,
                font_weight="bold",
                text_anchor="middle",
                dominant_baseline="central",
            )
        )
        row = 1

    for i, label in enumerate(labels):
        entry_y = y + LEGEND_PADDING + (row + i) * LEGEND_LINE_HEIGHT + LEGEND_LINE_HEIGHT / 2
        fill = fills[i] if i < len(fills) else "none"

        drawing.append(
            draw.Rectangle(
                x + LEGEND_PADDING,
                entry_y - LEGEND_SWATCH_SIZE / 2,
                LEGEND_SWATCH_SIZE,
                LEGEND_SWATCH_SIZE,
                fill=fill,
                stroke=theme.wedge_stroke,
                stroke_width=theme.wedge_stroke_width,
            )
        )

        drawing.append(
            draw.Text(
                str(label),
                theme.legend_font_size,
                x + LEGEND_PADDING + LEGEND_SWATCH_SIZE + LEGEND_TEXT_GAP,
                entry_y,
                fill=theme.legend_text_color,
                font_family=theme.label_font_family,
                dominant_baseline="central",
            )
        )
