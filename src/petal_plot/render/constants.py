"""Render constants used across render modules.

Centralizes magic numbers from svg.py and legend.py.
Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_SIZE: int = 480
"""Default width and height of the square drawing, in pixels."""

CANVAS_PADDING: float = 40.0
"""Space between the frame circle and the canvas edge."""

TITLE_Y: float = 22.0
"""Baseline of the title text."""

AXIS_LABEL_GAP: float = 10.0
"""Distance of axis captions from the canvas edge."""

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
LABEL_LINE_HEIGHT: float = 1.1
"""Line height (in ems) for two-line label + statistic text."""

# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
LEGEND_LINE_HEIGHT: float = 20.0
"""Vertical height per entry in the legend."""

LEGEND_PADDING: float = 8.0
"""Internal padding of legend box."""

LEGEND_SWATCH_SIZE: float = 12.0
"""Side of the square fill swatch."""

LEGEND_TEXT_GAP: float = 8.0
"""Gap between swatch and label text."""

LEGEND_CHAR_WIDTH_RATIO: float = 0.55
"""Character width as a fraction of font size for legend text sizing."""

LEGEND_INSET: float = 6.0
"""Gap between the legend box and the canvas edge."""

LEGEND_BORDER_RADIUS: int = 3
"""Corner radius for legend background rectangle."""

LEGEND_POSITIONS: tuple[str, ...] = ("bottomright", "bottomleft", "topright", "topleft")
"""Accepted legend corner names."""
