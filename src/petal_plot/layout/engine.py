"""Wedge layout engine: maps magnitude series onto unit circle geometry.

Each bin owns an equal slice of the circle, starting at 12 o'clock. A
petal is drawn as an arc at the bin's scaled radius, closed through two
points on a small inset circle rather than the origin, so neighbouring
petals do not all meet in one dense point. With a second series each bin
is split in half and the two petals sit side by side.

Clockwise layouts mirror x coordinates about the vertical axis; radii and
bin order are unchanged.
"""

from __future__ import annotations

import logging
import math
import warnings
from collections.abc import Sequence

from petal_plot.errors import RoseDataError, SeriesLengthWarning
from petal_plot.layout.constants import (
    CLOCK_START,
    DEFAULT_CENTER_INSET,
    DEFAULT_DP,
    DEFAULT_SCALE,
    FRAME_SAMPLES,
    SEPARATOR_OUTER_RADIUS,
    WEDGE_SAMPLES,
)
from petal_plot.layout.labels import bisector_angle, place_labels
from petal_plot.layout.scaling import normalize, scale_series, validate_series
from petal_plot.parser.model import Point, RoseLayout, Segment, Wedge

logger = logging.getLogger(__name__)


def compute_layout(
    area1: Sequence[float],
    area2: Sequence[float] | None = None,
    spokes: Sequence[float] | None = None,
    scale: float = DEFAULT_SCALE,
    clockwise: bool = True,
    center_inset: float = DEFAULT_CENTER_INSET,
    length_mode: bool = False,
    bins: int | None = None,
    labels: Sequence[str] | None = None,
    stats: bool = True,
    dp: int = DEFAULT_DP,
    lines: bool = False,
    series_names: tuple[str, str] = ("area1", "area2"),
) -> RoseLayout:
    """Compute petal polygons, spokes, separators and label anchors.

    ``bins`` sets the angular width of each slice and defaults to the
    length of ``area1``. A secondary series of a different length is laid
    out with its own wedge count and reported through a
    ``SeriesLengthWarning``.
    """
    values1 = validate_series(area1, series_names[0])
    values2 = (
        validate_series(area2, series_names[1]) if area2 is not None else None
    )
    if bins is None:
        bins = len(values1)
    if bins < 1 or not values1:
        raise RoseDataError("At least one bin with a value is required")

    layout = RoseLayout(
        bins=bins,
        scale=scale,
        clockwise=clockwise,
        center_inset=center_inset,
        length_mode=length_mode,
        frame=_frame_points(),
        series_names=series_names,
    )

    if values2 is not None and len(values2) != len(values1):
        _warn(layout, f"length of {series_names[0]} ({len(values1)}) and "
                      f"{series_names[1]} ({len(values2)}) not equal")

    radii1, radii2 = scale_series(values1, values2, scale, length_mode)
    logger.debug("Laying out %d bins (%s, %s)", bins,
                 "length" if length_mode else "area",
                 "clockwise" if clockwise else "anticlockwise")

    if radii2 is None:
        for k, (value, radius) in enumerate(zip(values1, radii1)):
            layout.primary.append(_wedge(
                layout, k, 0, value, radius,
                first=1, last=WEDGE_SAMPLES,
                inset_start=1, inset_end=WEDGE_SAMPLES,
            ))
    else:
        half = WEDGE_SAMPLES // 2
        for k, (value, radius) in enumerate(zip(values1, radii1)):
            layout.primary.append(_wedge(
                layout, k, 0, value, radius,
                first=1, last=half,
                inset_start=0, inset_end=half + 1,
            ))
        for k, (value, radius) in enumerate(zip(values2, radii2)):
            layout.secondary.append(_wedge(
                layout, k, 1, value, radius,
                first=half + 1, last=WEDGE_SAMPLES,
                inset_start=half, inset_end=WEDGE_SAMPLES,
            ))

    if spokes is not None:
        spoke_values = validate_series(spokes, "spokes")
        if len(spoke_values) != bins:
            _warn(layout, f"{len(spoke_values)} spokes given for {bins} bins")
        layout.spokes = _spokes(layout, spoke_values[:bins])

    if lines:
        layout.separators = _separators(layout)

    if labels is not None:
        layout.labels = place_labels(
            labels, values1, bins, clockwise=clockwise, stats=stats, dp=dp
        )

    return layout


def _warn(layout: RoseLayout, message: str) -> None:
    layout.warnings.append(message)
    warnings.warn(message, SeriesLengthWarning, stacklevel=3)


def _polar(direction: int, radius: float, angle: float) -> Point:
    return (direction * radius * math.cos(angle), radius * math.sin(angle))


def _bin_start(bin_index: int, bins: int) -> float:
    return CLOCK_START + 2 * math.pi * bin_index / bins


def _sample_angle(start: float, bins: int, sample: int) -> float:
    return start + 2 * math.pi * sample / (WEDGE_SAMPLES * bins)


def _wedge(
    layout: RoseLayout,
    bin_index: int,
    series_index: int,
    value: float,
    radius: float,
    first: int,
    last: int,
    inset_start: int,
    inset_end: int,
) -> Wedge:
    """Build one petal from arc samples ``first..last`` of a bin.

    The polygon opens and closes on the inset circle at samples
    ``inset_start`` and ``inset_end``.
    """
    bins = layout.bins
    direction = layout.direction
    start = _bin_start(bin_index, bins)

    points = [_polar(direction, layout.center_inset,
                     _sample_angle(start, bins, inset_start))]
    for i in range(first, last + 1):
        points.append(_polar(direction, radius, _sample_angle(start, bins, i)))
    points.append(_polar(direction, layout.center_inset,
                         _sample_angle(start, bins, inset_end)))

    start_fraction = (first - 1) / WEDGE_SAMPLES
    end_fraction = last / WEDGE_SAMPLES
    return Wedge(
        bin_index=bin_index,
        series_index=series_index,
        value=value,
        radius=radius,
        start_angle=start + 2 * math.pi * start_fraction / bins,
        end_angle=start + 2 * math.pi * end_fraction / bins,
        start_fraction=start_fraction,
        end_fraction=end_fraction,
        points=points,
    )


def _spokes(layout: RoseLayout, values: list[float]) -> list[Segment]:
    """Uncertainty spokes along bin bisectors, scaled to their own maximum."""
    (lengths,) = normalize([values], layout.scale)
    segments = []
    for k, length in enumerate(lengths):
        angle = bisector_angle(k, layout.bins)
        segments.append(Segment(
            bin_index=k,
            start=_polar(layout.direction, layout.center_inset * length, angle),
            end=_polar(layout.direction, length, angle),
            length=length,
        ))
    return segments


def _separators(layout: RoseLayout) -> list[Segment]:
    """Radial lines on the closing boundary of each bin."""
    segments = []
    for k in range(layout.bins):
        angle = _bin_start(k + 1, layout.bins)
        segments.append(Segment(
            bin_index=k,
            start=_polar(layout.direction, layout.center_inset, angle),
            end=_polar(layout.direction, SEPARATOR_OUTER_RADIUS, angle),
            length=SEPARATOR_OUTER_RADIUS - layout.center_inset,
        ))
    return segments


def _frame_points() -> list[Point]:
    """Unit circle outline."""
    return [
        (math.cos(2 * math.pi * i / FRAME_SAMPLES),
         math.sin(2 * math.pi * i / FRAME_SAMPLES))
        for i in range(1, FRAME_SAMPLES + 1)
    ]
