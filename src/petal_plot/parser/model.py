"""Data model for rose diagrams: parsed input and computed geometry."""

from __future__ import annotations

from dataclasses import dataclass, field

Point = tuple[float, float]


@dataclass
class RoseData:
    """Series parsed from an input table."""

    area1: list[float]
    area2: list[float] | None = None
    spokes: list[float] | None = None
    labels: list[str] | None = None
    series_names: tuple[str, str] = ("area1", "area2")

    @property
    def bins(self) -> int:
        return len(self.area1)


@dataclass
class Wedge:
    """A petal polygon for one bin of one series.

    ``start_fraction`` and ``end_fraction`` give the nominal share of the
    bin's angular width covered by this wedge (0..1 for a lone series,
    0..0.5 and 0.5..1 when two series share the bin).
    """

    bin_index: int
    series_index: int
    value: float
    radius: float
    start_angle: float
    end_angle: float
    start_fraction: float
    end_fraction: float
    points: list[Point] = field(default_factory=list)


@dataclass
class Segment:
    """A straight line between two points (spoke or separator)."""

    bin_index: int
    start: Point
    end: Point
    length: float = 0.0


@dataclass
class LabelAnchor:
    """Text anchored on a bin bisector."""

    bin_index: int
    text: str
    x: float
    y: float
    radius: float
    angle: float

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")


@dataclass
class RoseLayout:
    """Geometry for a complete rose diagram, in unit circle coordinates."""

    bins: int
    scale: float
    clockwise: bool
    center_inset: float
    length_mode: bool
    primary: list[Wedge] = field(default_factory=list)
    secondary: list[Wedge] = field(default_factory=list)
    spokes: list[Segment] = field(default_factory=list)
    separators: list[Segment] = field(default_factory=list)
    labels: list[LabelAnchor] = field(default_factory=list)
    frame: list[Point] = field(default_factory=list)
    series_names: tuple[str, str] = ("area1", "area2")
    warnings: list[str] = field(default_factory=list)

    @property
    def has_secondary(self) -> bool:
        return bool(self.secondary)

    @property
    def direction(self) -> int:
        return -1 if self.clockwise else 1

    def wedges_for_bin(self, bin_index: int) -> list[Wedge]:
        """Return every wedge drawn in a bin, primary first."""
        return [
            w for w in self.primary + self.secondary
            if w.bin_index == bin_index
        ]
