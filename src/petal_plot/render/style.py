"""Theme and style settings for rose diagram rendering."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Theme:
    """Visual theme for a rose diagram."""

    name: str
    background_color: str
    frame_stroke: str
    frame_stroke_width: float
    wedge_stroke: str
    wedge_stroke_width: float
    piece_colors: tuple[str, str]
    spoke_color: str
    spoke_width: float
    separator_color: str
    separator_width: float
    separator_dasharray: str
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    axis_label_font_size: float
    legend_background: str
    legend_stroke: str
    legend_text_color: str
    legend_font_size: float


_active_theme: Theme | None = None


def get_active_theme() -> Theme:
    """Return the theme currently in effect (``classic`` by default)."""
    if _active_theme is not None:
        return _active_theme
    from petal_plot.themes import CLASSIC_THEME

    return CLASSIC_THEME


@contextmanager
def theme_context(theme: Theme | None = None, **overrides) -> Iterator[Theme]:
    """Make ``theme`` (with field overrides) active for the enclosed block.

    The previously active theme is restored on exit, including when the
    block raises.
    """
    global _active_theme

    previous = _active_theme
    base = theme if theme is not None else get_active_theme()
    settings = {k: v for k, v in overrides.items() if v is not None}
    if "piece_colors" in settings:
        settings["piece_colors"] = _pad_colors(
            settings["piece_colors"], base.piece_colors
        )
    _active_theme = replace(base, **settings) if settings else base
    try:
        yield _active_theme
    finally:
        _active_theme = previous


def _pad_colors(
    colors: tuple[str, ...] | list[str], fallback: tuple[str, str]
) -> tuple[str, str]:
    """Fill a one-colour override from the fallback pair."""
    colors = tuple(colors)
    if len(colors) >= 2:
        return (colors[0], colors[1])
    if len(colors) == 1:
        return (colors[0], fallback[1])
    return fallback
