"""CLI for petal-plot."""

from __future__ import annotations

import logging
import warnings
from pathlib import Path

import click

from petal_plot import __version__
from petal_plot.errors import RoseDataError
from petal_plot.layout import compute_layout
from petal_plot.parser import RoseData, parse_series_table
from petal_plot.render import render_svg
from petal_plot.render.constants import CANVAS_SIZE, LEGEND_POSITIONS
from petal_plot.themes import THEMES


def _load(
    input_file: Path,
    area1: str,
    area2: str | None,
    spokes: str | None,
    labels: str | None,
) -> RoseData:
    try:
        text = input_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        click.echo(f"Parse error: {input_file} is not UTF-8 text ({e.reason})", err=True)
        raise SystemExit(1)
    try:
        return parse_series_table(
            text, area1=area1, area2=area2, spokes=spokes, labels=labels
        )
    except RoseDataError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


def _column_options(func):
    """Options selecting which table columns feed each series."""
    func = click.option("--labels", "labels_column", default="label",
                        help="Column holding bin labels (default: label)")(func)
    func = click.option("--spokes", "spokes_column", default=None,
                        help="Column holding spoke values (default: spokes if present)")(func)
    func = click.option("--area2", "area2_column", default=None,
                        help="Column for the second series (default: area2 if present)")(func)
    func = click.option("--area1", "area1_column", default="area1",
                        help="Column for the primary series (default: area1)")(func)
    return func


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """petal-plot: Draw circular rose diagrams from CSV series tables."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="classic",
              help="Visual theme (default: classic)")
@click.option("--size", type=int, default=CANVAS_SIZE,
              help=f"SVG width and height in pixels (default: {CANVAS_SIZE})")
@click.option("--scale", type=float, default=0.8,
              help="Radius of the largest petal (default: 0.8)")
@click.option("--clockwise/--anticlockwise", default=True,
              help="Direction petals run from 12 o'clock (default: clockwise)")
@click.option("--length", "length_mode", is_flag=True,
              help="Make petal length, not area, proportional to the data")
@click.option("--lines", is_flag=True, help="Add dotted lines between petals")
@click.option("--center-inset", type=float, default=0.03,
              help="Radius of the circle petals start from (default: 0.03)")
@click.option("--stats/--no-stats", default=True,
              help="Print values under the labels (default: on)")
@click.option("--dp", type=int, default=1,
              help="Decimal places for values (default: 1)")
@click.option("--colors", default=None,
              help="Comma-separated fill colours for the two series")
@click.option("--spoke-color", default=None, help="Colour of uncertainty spokes")
@click.option("--legend/--no-legend", default=None,
              help="Show the legend (default: when two series are drawn)")
@click.option("--legend-position", type=click.Choice(list(LEGEND_POSITIONS)),
              default="bottomright", help="Legend corner (default: bottomright)")
@click.option("--legend-title", default="", help="Legend title")
@click.option("--title", default="", help="Diagram title")
@click.option("--xlab", default="", help="Caption below the diagram")
@click.option("--ylab", default="", help="Caption left of the diagram")
@_column_options
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    size: int,
    scale: float,
    clockwise: bool,
    length_mode: bool,
    lines: bool,
    center_inset: float,
    stats: bool,
    dp: int,
    colors: str | None,
    spoke_color: str | None,
    legend: bool | None,
    legend_position: str,
    legend_title: str,
    title: str,
    xlab: str,
    ylab: str,
    area1_column: str,
    area2_column: str | None,
    spokes_column: str | None,
    labels_column: str | None,
) -> None:
    """Render a CSV series table to a rose diagram SVG."""
    data = _load(input_file, area1_column, area2_column, spokes_column, labels_column)

    with warnings.catch_warnings(record=True):
        warnings.simplefilter("always")
        try:
            layout = compute_layout(
                data.area1,
                area2=data.area2,
                spokes=data.spokes,
                scale=scale,
                clockwise=clockwise,
                center_inset=center_inset,
                length_mode=length_mode,
                labels=data.labels,
                stats=stats,
                dp=dp,
                lines=lines,
                series_names=data.series_names,
            )
        except RoseDataError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)

    for message in layout.warnings:
        click.echo(f"Warning: {message}", err=True)

    piece_colors = None
    if colors:
        piece_colors = tuple(c.strip() for c in colors.split(",") if c.strip())

    svg = render_svg(
        layout,
        THEMES[theme],
        size=size,
        title=title,
        xlab=xlab,
        ylab=ylab,
        legend=legend,
        legend_title=legend_title,
        legend_position=legend_position,
        piece_colors=piece_colors,
        spoke_color=spoke_color,
    )

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg + "\n")
    click.echo(f"Rendered {len(layout.primary)} petals"
               + (f" + {len(layout.secondary)}" if layout.secondary else "")
               + f" in {layout.bins} bins -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@_column_options
def validate(
    input_file: Path,
    area1_column: str,
    area2_column: str | None,
    spokes_column: str | None,
    labels_column: str | None,
) -> None:
    """Validate a CSV series table."""
    data = _load(input_file, area1_column, area2_column, spokes_column, labels_column)

    errors = []
    notes = []

    with warnings.catch_warnings(record=True):
        warnings.simplefilter("always")
        try:
            layout = compute_layout(
                data.area1,
                area2=data.area2,
                spokes=data.spokes,
                labels=data.labels,
                series_names=data.series_names,
            )
            notes.extend(layout.warnings)
        except RoseDataError as e:
            errors.append(str(e))

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    for note in notes:
        click.echo(f"Warning: {note}", err=True)

    click.echo(f"Valid: {data.bins} bins, "
               f"{2 if data.area2 is not None else 1} series, "
               f"{'spokes' if data.spokes is not None else 'no spokes'}, "
               f"{'labels' if data.labels is not None else 'no labels'}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@_column_options
def info(
    input_file: Path,
    area1_column: str,
    area2_column: str | None,
    spokes_column: str | None,
    labels_column: str | None,
) -> None:
    """Show information about a CSV series table."""
    data = _load(input_file, area1_column, area2_column, spokes_column, labels_column)

    click.echo(f"Bins: {data.bins}")
    series = [(data.series_names[0], data.area1)]
    if data.area2 is not None:
        series.append((data.series_names[1], data.area2))
    if data.spokes is not None:
        series.append(("spokes", data.spokes))
    click.echo(f"Series: {len(series)}")
    for name, values in series:
        click.echo(f"  {name}: {len(values)} values, "
                   f"min {min(values):g}, max {max(values):g}, "
                   f"total {sum(values):g}")
    if data.labels is not None:
        click.echo(f"Labels: {', '.join(data.labels)}")
    else:
        click.echo("Labels: (none)")
