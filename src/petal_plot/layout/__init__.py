"""Layout engine for rose diagrams."""

from petal_plot.layout.engine import compute_layout

__all__ = ["compute_layout"]
