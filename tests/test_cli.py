"""Tests for the CLI entry points."""

from pathlib import Path

from click.testing import CliRunner

from petal_plot.cli import cli

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
MONTHS_CSV = EXAMPLES_DIR / "months.csv"
WEEKDAYS_CSV = EXAMPLES_DIR / "weekdays.csv"
RAGGED_CSV = EXAMPLES_DIR / "ragged.csv"


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(WEEKDAYS_CSV), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()
    content = out.read_text()
    assert "<svg" in content
    assert "Mon" in content
    assert "7 petals" in result.output


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    csv = tmp_path / "test.csv"
    csv.write_text(WEEKDAYS_CSV.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(csv)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "test.svg").exists()


def test_render_two_series_options(tmp_path):
    out = tmp_path / "months.svg"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(MONTHS_CSV), "-o", str(out),
        "--area1", "observed", "--area2", "expected",
        "--scale", "0.72", "--dp", "0", "--lines",
        "--colors", "green,red", "--legend-title", "# players",
        "--title", "Observed and expected",
    ])
    assert result.exit_code == 0, result.output
    content = out.read_text()
    assert 'fill="green"' in content
    assert "# players" in content
    assert "observed" in content
    assert "12 petals + 12" in result.output


def test_render_ragged_warns(tmp_path):
    out = tmp_path / "ragged.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(RAGGED_CSV), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "Warning:" in result.output
    assert "not equal" in result.output


def test_render_svg_ends_with_newline(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(WEEKDAYS_CSV), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_text().endswith("\n")


def test_render_with_theme(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["render", str(WEEKDAYS_CSV), "-o", str(out), "--theme", "dark"]
    )
    assert result.exit_code == 0, result.output
    assert "#2b2b2b" in out.read_text()


def test_render_negative_value(tmp_path):
    bad = tmp_path / "bad.csv"
    bad.write_text("area1\n1\n-2\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(bad), "-o", str(tmp_path / "bad.svg")])
    assert result.exit_code == 1
    assert "negative" in result.output


def test_render_nonexistent_file():
    runner = CliRunner()
    result = runner.invoke(cli, ["render", "/nonexistent/file.csv"])
    assert result.exit_code != 0


def test_validate_success():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(WEEKDAYS_CSV)])
    assert result.exit_code == 0
    assert "Valid: 7 bins" in result.output


def test_validate_bad_file(tmp_path):
    bad = tmp_path / "bad.csv"
    bad.write_text("area1\n1\nmany\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "not a number" in result.output


def test_validate_too_few_labels(tmp_path):
    bad = tmp_path / "bad.csv"
    bad.write_text("label,area1\na,1\n,2\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "labels" in result.output


def test_info_output():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(MONTHS_CSV), "--area1", "observed",
                                 "--area2", "expected"])
    assert result.exit_code == 0, result.output
    assert "Bins: 12" in result.output
    assert "Series: 3" in result.output
    assert "observed: 12 values" in result.output
    assert "Labels: Jan" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


def test_validate_separators_only(tmp_path):
    bad = tmp_path / "blank.csv"
    bad.write_text(",,\n,,\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "Parse error:" in result.output
    assert "no header row" in result.output
    assert not isinstance(result.exception, IndexError)


def test_render_non_utf8_file(tmp_path):
    bad = tmp_path / "latin1.csv"
    bad.write_bytes("label,area1\nMärz,1\n".encode("latin-1"))
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(bad), "-o", str(tmp_path / "out.svg")])
    assert result.exit_code == 1
    assert "Parse error:" in result.output
    assert "not UTF-8" in result.output
