"""Parser for CSV series tables.

A table has a header row naming its columns. Each numeric column is one
series; a text column may carry bin labels::

    label,area1,area2,spokes
    Jan,12,10.5,1.2
    Feb,9,11.0,0.8

Trailing empty cells end a column early, so series of different lengths can
share a file. An empty cell followed by a value is an error.
"""

from __future__ import annotations

import csv
import io
import math

from petal_plot.errors import RoseDataError
from petal_plot.parser.model import RoseData


def _detect_unsupported(text: str) -> None:
    """Detect obviously wrong input formats and raise helpful errors."""
    stripped = text.lstrip()
    if not stripped:
        raise RoseDataError("Input table is empty")
    if stripped.startswith("<"):
        raise RoseDataError(
            "Input looks like XML/SVG, expected a CSV table with a header row"
        )
    if stripped.startswith(("{", "[")):
        raise RoseDataError(
            "Input looks like JSON, expected a CSV table with a header row"
        )


def _column(
    header: list[str], rows: list[list[str]], name: str
) -> list[str]:
    """Return the cells of a named column, with trailing blanks removed."""
    if name not in header:
        raise RoseDataError(
            f"Column '{name}' not found (available: {', '.join(header)})"
        )
    idx = header.index(name)
    cells = [row[idx].strip() if idx < len(row) else "" for row in rows]

    while cells and not cells[-1]:
        cells.pop()

    for row_no, cell in enumerate(cells, start=2):
        if not cell:
            raise RoseDataError(
                f"Column '{name}' has an empty cell at row {row_no} "
                "before the end of the series"
            )
    return cells


def _numeric_column(
    header: list[str], rows: list[list[str]], name: str
) -> list[float]:
    values: list[float] = []
    for row_no, cell in enumerate(_column(header, rows, name), start=2):
        try:
            value = float(cell)
        except ValueError:
            raise RoseDataError(
                f"Column '{name}' row {row_no}: '{cell}' is not a number"
            ) from None
        if not math.isfinite(value):
            raise RoseDataError(
                f"Column '{name}' row {row_no}: '{cell}' is not finite"
            )
        values.append(value)
    return values


def parse_series_table(
    text: str,
    area1: str = "area1",
    area2: str | None = None,
    spokes: str | None = None,
    labels: str | None = "label",
) -> RoseData:
    """Parse a CSV table into a RoseData.

    ``area2`` and ``spokes`` default to columns literally named ``area2`` and
    ``spokes`` when present. A missing ``labels`` column is only an error if
    it was asked for by a name other than the default.
    """
    _detect_unsupported(text)

    reader = csv.reader(io.StringIO(text))
    rows = [row for row in reader if any(cell.strip() for cell in row)]
    if not rows:
        raise RoseDataError("Input table has no header row")
    header = [cell.strip() for cell in rows[0]]
    body = rows[1:]

    if area2 is None and "area2" in header and area1 != "area2":
        area2 = "area2"
    if spokes is None and "spokes" in header:
        spokes = "spokes"

    primary = _numeric_column(header, body, area1)
    secondary = _numeric_column(header, body, area2) if area2 else None
    spoke_values = _numeric_column(header, body, spokes) if spokes else None

    for name, values in ((area1, primary), (area2, secondary), (spokes, spoke_values)):
        if values is not None and not values:
            raise RoseDataError(f"Column '{name}' has no values")

    label_cells: list[str] | None = None
    if labels:
        if labels in header:
            label_cells = _column(header, body, labels)
        elif labels != "label":
            raise RoseDataError(
                f"Column '{labels}' not found (available: {', '.join(header)})"
            )

    return RoseData(
        area1=primary,
        area2=secondary,
        spokes=spoke_values,
        labels=label_cells,
        series_names=(area1, area2 or "area2"),
    )
