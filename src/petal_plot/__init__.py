"""petal-plot: circular rose (petal) diagrams rendered to SVG."""

from petal_plot.errors import RoseDataError, SeriesLengthWarning
from petal_plot.layout import compute_layout
from petal_plot.render import render_svg
from petal_plot.rose import plot_rose

__version__ = "0.1.0"

__all__ = [
    "RoseDataError",
    "SeriesLengthWarning",
    "compute_layout",
    "plot_rose",
    "render_svg",
    "__version__",
]
