from pathlib import Path

import pytest
from typer.testing import CliRunner

from kwic import app

runner = CliRunner()


@pytest.fixture
def sources(tmp_path: Path) -> tuple[str, str]:
    titles = tmp_path / "titles.txt"
    noise = tmp_path / "noise.txt"
    titles.write_text("the Cat sat\n", encoding="utf-8")
    noise.write_text("the\n", encoding="utf-8")
    return str(titles), str(noise)


def test_prints_index_and_timing(sources):
    result = runner.invoke(app, list(sources))

    assert result.exit_code == 0
    assert result.stdout.startswith("\nCat sat the \n\nsat the Cat \n")
    assert "microseconds to complete." in result.output


def test_summary_table(sources):
    result = runner.invoke(app, [*sources, "--summary"])

    assert result.exit_code == 0
    assert "Index Summary" in result.output
    assert "Rotations emitted" in result.output


@pytest.mark.parametrize(
    "args, message",
    [
        ([], "Not enough arguments"),
        (["only-one.txt"], "Not enough arguments"),
        (["a.txt", "b.txt", "c.txt"], "Too many arguments"),
    ],
)
def test_wrong_argument_count_exits_1(args, message):
    result = runner.invoke(app, args)

    assert result.exit_code == 1
    assert message in result.stderr
    assert result.stdout == ""


def test_missing_noise_file_exits_1(sources, tmp_path: Path):
    titles, _ = sources
    result = runner.invoke(app, [titles, str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "Error opening noise words file" in result.stderr
    assert result.stdout == ""


def test_missing_input_file_exits_1(sources, tmp_path: Path):
    _, noise = sources
    result = runner.invoke(app, [str(tmp_path / "missing.txt"), noise])

    assert result.exit_code == 1
    assert "Error opening input file" in result.stderr
    assert result.stdout == ""
