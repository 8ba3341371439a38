"""Label placement on bin bisectors.

Labels sit just inside the frame circle. When a statistic line is added
below the label the anchor moves further in so both lines stay inside.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from petal_plot.errors import RoseDataError
from petal_plot.layout.constants import (
    CLOCK_START,
    DEFAULT_DP,
    LABEL_RADIUS,
    LABEL_STAT_RADIUS,
)
from petal_plot.parser.model import LabelAnchor


def format_stat(value: float, dp: int = DEFAULT_DP) -> str:
    """Format a value with a fixed number of decimal places."""
    return f"{value:.{max(dp, 0)}f}"


def bisector_angle(bin_index: int, bins: int) -> float:
    """Angle of the line through the middle of a bin."""
    return CLOCK_START + 2 * math.pi * bin_index / bins + math.pi / bins


def place_labels(
    labels: Sequence[str],
    values: Sequence[float],
    bins: int,
    clockwise: bool = True,
    stats: bool = True,
    dp: int = DEFAULT_DP,
) -> list[LabelAnchor]:
    """Anchor one label per bin, optionally followed by its value."""
    if len(labels) < bins:
        raise RoseDataError(
            f"Got {len(labels)} labels for {bins} bins"
        )
    direction = -1 if clockwise else 1
    radius = LABEL_STAT_RADIUS if stats else LABEL_RADIUS

    placements: list[LabelAnchor] = []
    for k in range(bins):
        angle = bisector_angle(k, bins)
        text = str(labels[k])
        if stats and k < len(values):
            text = f"{text}\n{format_stat(values[k], dp)}"
        placements.append(LabelAnchor(
            bin_index=k,
            text=text,
            x=direction * radius * math.cos(angle),
            y=radius * math.sin(angle),
            radius=radius,
            angle=angle,
        ))
    return placements
