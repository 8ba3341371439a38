"""SVG rendering for rose diagrams."""

from petal_plot.render.style import Theme, theme_context
from petal_plot.render.svg import render_svg

__all__ = ["Theme", "render_svg", "theme_context"]
