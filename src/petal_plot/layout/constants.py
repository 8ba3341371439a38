"""Layout constants for rose diagram geometry.

All distances are in unit circle coordinates: the frame circle has radius 1.
"""

import math

# ---------------------------------------------------------------------------
# Angles
# ---------------------------------------------------------------------------
CLOCK_START: float = math.pi / 2
"""Angle of the first bin boundary (12 o'clock)."""

# ---------------------------------------------------------------------------
# Sampling
# ---------------------------------------------------------------------------
WEDGE_SAMPLES: int = 100
"""Arc samples per bin; split 50/50 when two series share a bin."""

FRAME_SAMPLES: int = 200
"""Samples for the unit circle frame outline."""

# ---------------------------------------------------------------------------
# Scaling
# ---------------------------------------------------------------------------
AREA_FACTOR: float = 12 / math.pi
"""Multiplier applied before the square root in area-proportional mode."""

DEFAULT_SCALE: float = 0.8
"""Radius reached by the largest wedge."""

DEFAULT_CENTER_INSET: float = 0.03
"""Radius wedge edges are pulled in to near the centre."""

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
LABEL_RADIUS: float = 0.92
"""Anchor radius for labels without statistics."""

LABEL_STAT_RADIUS: float = 0.86
"""Anchor radius for labels followed by a statistic line."""

DEFAULT_DP: int = 1
"""Decimal places for statistics."""

# ---------------------------------------------------------------------------
# Separators
# ---------------------------------------------------------------------------
SEPARATOR_OUTER_RADIUS: float = 1.0
"""Separators run from the centre inset out to the frame."""
