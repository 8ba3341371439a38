"""Input parsing for rose diagrams."""

from petal_plot.parser.model import RoseData
from petal_plot.parser.table import parse_series_table

__all__ = ["RoseData", "parse_series_table"]
