"""Theme definitions for rose diagrams."""

from petal_plot.themes.classic import CLASSIC_THEME
from petal_plot.themes.dark import DARK_THEME

THEMES = {
    "classic": CLASSIC_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "CLASSIC_THEME", "DARK_THEME"]
