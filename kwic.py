"""KWIC CLI: build a keyword-in-context index from a title file.

    kwic input_filename noise_words_filename

Every rotation of every input line that does not start with a noise word
is printed, sorted case-insensitively with lowercase before uppercase on
ties, followed by the elapsed time.
Uses typer for argument parsing and rich for errors, logs and the summary.
"""

from __future__ import annotations

import logging
import time

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.errors import ArgumentCountError, KwicError
from core.formatter import format_elapsed, format_index
from core.logging_config import configure_logging
from core.pipeline import KwicIndex, index_files

app = typer.Typer(help="KWIC: keyword-in-context index of circular shifts.")
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("kwic")

EXPECTED_ARGS = 2


def _check_arguments(paths: list[str]) -> tuple[str, str]:
    if len(paths) != EXPECTED_ARGS:
        raise ArgumentCountError(len(paths), EXPECTED_ARGS)
    input_path, noise_path = paths
    return input_path, noise_path


SUMMARY_LABELS = {
    "lines": "Lines",
    "empty_lines": "Empty lines",
    "considered": "Offsets considered",
    "emitted": "Rotations emitted",
    "suppressed": "Suppressed (noise)",
}


def _print_summary(index: KwicIndex) -> None:
    table = Table(title="Index Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    for key, value in index.stats.to_dict().items():
        table.add_row(SUMMARY_LABELS[key], str(value))
    console.print(table)


@app.command()
def main(
    paths: list[str] | None = typer.Argument(
        None, help="Input file, then noise-word file", show_default=False
    ),
    summary: bool = typer.Option(False, "--summary", help="Print index statistics"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Print the sorted KWIC index of INPUT_FILE, skipping rotations led by noise words."""
    configure_logging(verbose, err_console)

    try:
        input_path, noise_path = _check_arguments(list(paths or []))

        start = time.perf_counter_ns()
        index = index_files(input_path, noise_path)
        typer.echo(format_index(index.rotations), nl=False)
        elapsed_us = (time.perf_counter_ns() - start) // 1000
    except KwicError as e:
        logger.debug("aborting: %s", type(e).__name__)
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    typer.echo(format_elapsed(elapsed_us))

    if summary:
        _print_summary(index)


if __name__ == "__main__":
    app()
