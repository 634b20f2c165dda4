"""awesome report - Cucumber report aggregation."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from awesome.errors import SinkWriteFailure
from awesome.reporters import aggregate, emit_all

from .context import AppContext, pass_app

err_console = Console(stderr=True)


@click.command()
@click.option(
    "--dir",
    "directory",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory containing report files (default: current directory)",
)
@click.option(
    "--prefix",
    default=None,
    help="Prefix of JSON files to analyze (default: cucumber_report)",
)
@click.option(
    "--output-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Where aggregated files are written (default: current directory)",
)
@pass_app
def report(app: AppContext, directory, prefix, output_dir):
    """Aggregate Cucumber JSON reports by scenario.

    Writes <prefix>_aggregated_results.json and <prefix>_report.html and
    prints a summary table.
    """
    settings = app.config.reporter
    directory = directory or settings.directory
    prefix = prefix or settings.prefix
    output_dir = output_dir or settings.output_dir

    results = aggregate(directory, prefix, fs=app.fs, verbose=app.verbose)
    try:
        emit_all(results, prefix, output_dir, fs=app.fs)
    except SinkWriteFailure as e:
        err_console.print(f"[red]Failed to output results: {escape(str(e))}[/red]")
        raise SystemExit(1)
