"""Magnitude transforms and normalization.

Area-proportional mode takes the square root of each value so that the
petal *area* (which grows with the square of its radius) tracks the data.
Length-proportional mode leaves values as they are.
"""

from __future__ import annotations

__all__ = ["validate_series", "transform", "normalize", "scale_series"]

import logging
import math
from collections.abc import Sequence

from petal_plot.errors import RoseDataError
from petal_plot.layout.constants import AREA_FACTOR

logger = logging.getLogger(__name__)


def validate_series(values: Sequence[float], name: str) -> list[float]:
    """Return ``values`` as floats, rejecting negative or non-finite entries."""
    result: list[float] = []
    for i, raw in enumerate(values):
        try:
            v = float(raw)
        except (TypeError, ValueError):
            raise RoseDataError(
                f"{name}[{i}] = {raw!r} is not a number"
            ) from None
        if not math.isfinite(v):
            raise RoseDataError(f"{name}[{i}] = {raw!r} is not finite")
        if v < 0:
            raise RoseDataError(f"{name}[{i}] = {raw!r} is negative")
        result.append(v)
    return result


def transform(values: Sequence[float], length_mode: bool = False) -> list[float]:
    """Apply the area transform ``sqrt(v * 12 / pi)`` unless in length mode."""
    if length_mode:
        return list(values)
    return [math.sqrt(v * AREA_FACTOR) for v in values]


def normalize(
    series: Sequence[Sequence[float]], scale: float
) -> list[list[float]]:
    """Scale each series against the maximum over all of them.

    A zero maximum (every value zero) gives zero radii instead of dividing
    by zero.
    """
    peak = max((v for values in series for v in values), default=0.0)
    logger.debug("Normalizing %d series against max %g", len(series), peak)
    if peak <= 0:
        return [[0.0] * len(values) for values in series]
    return [[scale * (v / peak) for v in values] for values in series]


def scale_series(
    area1: Sequence[float],
    area2: Sequence[float] | None = None,
    scale: float = 0.8,
    length_mode: bool = False,
) -> tuple[list[float], list[float] | None]:
    """Return wedge radii for one or two series sharing a common maximum."""
    t1 = transform(area1, length_mode)
    if area2 is None:
        (r1,) = normalize([t1], scale)
        return r1, None
    t2 = transform(area2, length_mode)
    r1, r2 = normalize([t1, t2], scale)
    return r1, r2
