#!/usr/bin/env python3
"""Draw every CSV in examples/ once per theme, for eyeballing changes.

Diagrams (SVG, plus PNG when cairosvg is installed) land in
/tmp/petal_plot_renders/.

Usage:
    python scripts/render_examples.py
"""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path

# Run from a checkout without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from petal_plot.layout.engine import compute_layout  # noqa: E402
from petal_plot.parser.table import parse_series_table  # noqa: E402
from petal_plot.render.svg import render_svg  # noqa: E402
from petal_plot.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/petal_plot_renders")
EXAMPLES_DIR = project_root / "examples"

EXAMPLE_FILES = sorted(EXAMPLES_DIR.glob("*.csv"))

# Column choices for tables that do not use the default area1/area2 names
COLUMNS = {
    "months": {"area1": "observed", "area2": "expected"},
}


def render_file(
    csv_path: Path, output_dir: Path, theme_name: str, *, lines: bool = False
) -> tuple[str, list[str]]:
    """Parse, lay out, and render a .csv table to SVG (and optionally PNG).

    Returns (name, list_of_issues).
    """
    name = f"{csv_path.stem}_{theme_name}"
    issues: list[str] = []

    try:
        data = parse_series_table(csv_path.read_text(), **COLUMNS.get(csv_path.stem, {}))
    except Exception as e:
        return name, [f"PARSE ERROR: {e}"]

    try:
        with warnings.catch_warnings(record=True):
            warnings.simplefilter("always")
            layout = compute_layout(
                data.area1,
                area2=data.area2,
                spokes=data.spokes,
                labels=data.labels,
                lines=lines,
                series_names=data.series_names,
            )
        issues.extend(f"warning: {w}" for w in layout.warnings)
    except Exception as e:
        return name, [f"LAYOUT ERROR: {e}"]

    try:
        svg_str = render_svg(layout, THEMES[theme_name], title=csv_path.stem)
    except Exception as e:
        return name, [f"RENDER ERROR: {e}"]

    svg_path = output_dir / f"{name}.svg"
    svg_path.write_text(svg_str)

    # Try PNG conversion via cairosvg (optional)
    try:
        import cairosvg

        png_path = output_dir / f"{name}.png"
        cairosvg.svg2png(bytestring=svg_str.encode(), write_to=str(png_path), scale=2)
    except ImportError:
        issues.append("cairosvg not available, skipping PNG")
    except Exception as e:
        issues.append(f"PNG conversion error: {e}")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render example tables")
    parser.add_argument(
        "--lines", action="store_true", help="Add dotted separators between petals"
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    jobs = [(f, theme) for f in EXAMPLE_FILES for theme in THEMES]
    print(f"Rendering {len(jobs)} diagrams to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f"{f.stem}_{t}") for f, t in jobs)
    any_errors = False

    for csv_path, theme_name in jobs:
        name, issues = render_file(csv_path, OUTPUT_DIR, theme_name, lines=args.lines)
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
