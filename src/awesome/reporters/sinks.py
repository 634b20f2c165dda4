"""Output sinks for aggregated scenario counts.

Sinks run in a fixed order (JSON, HTML, console). The first failing sink
raises SinkWriteFailure and the remaining sinks are skipped. Files already
written stay in place.
"""

import json
import logging
from pathlib import Path
from typing import IO

import click
from jinja2 import Environment

from awesome.errors import SinkWriteFailure
from awesome.utils.fs import FileSystem, OSFileSystem

from .models import ScenarioCounts

logger = logging.getLogger(__name__)

COLUMNS = ["Scenario Name", "Passed", "Pending", "Failed", "Skipped", "Error Messages"]
MESSAGE_SEPARATOR = "; "

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{{ title }}</title>
  <style>
    table { border-collapse: collapse; }
    th, td { border: 1px solid #999; padding: 4px 8px; }
    td.count { text-align: right; }
  </style>
</head>
<body>
  <h1>{{ title }}</h1>
  <table>
    <tr>
    {% for column in columns %}
      <th>{{ column }}</th>
    {% endfor %}
    </tr>
  {% for name, counts in results.items() %}
    <tr>
      <td>{{ name }}</td>
      <td class="count">{{ counts.passed }}</td>
      <td class="count">{{ counts.pending }}</td>
      <td class="count">{{ counts.failed }}</td>
      <td class="count">{{ counts.skipped }}</td>
      <td>{{ counts.messages | join(separator) }}</td>
    </tr>
  {% endfor %}
  </table>
</body>
</html>
"""

_env = Environment(trim_blocks=True, lstrip_blocks=True, autoescape=True)


def json_output_path(prefix: str, output_dir=".") -> Path:
    return Path(output_dir) / f"{prefix}_aggregated_results.json"


def html_output_path(prefix: str, output_dir=".") -> Path:
    return Path(output_dir) / f"{prefix}_report.html"


def results_to_dict(results: dict[str, ScenarioCounts]) -> dict[str, dict]:
    return {name: counts.model_dump() for name, counts in results.items()}


def write_json(
    results: dict[str, ScenarioCounts],
    prefix: str,
    output_dir=".",
    fs: FileSystem | None = None,
) -> Path:
    """Write the aggregate as pretty-printed JSON.

    Raises:
        SinkWriteFailure: If the file cannot be written.
    """
    fs = fs or OSFileSystem()
    path = json_output_path(prefix, output_dir)
    data = json.dumps(results_to_dict(results), indent=4, ensure_ascii=False)
    try:
        fs.write_bytes(path, data.encode("utf-8"))
    except OSError as e:
        raise SinkWriteFailure("json", path, str(e)) from e
    logger.debug(f"Wrote {path}")
    return path


def load_aggregated_results(path, fs: FileSystem | None = None) -> dict[str, ScenarioCounts]:
    """Read back a file produced by ``write_json``."""
    fs = fs or OSFileSystem()
    data = json.loads(fs.read_bytes(path))
    return {name: ScenarioCounts(**counts) for name, counts in data.items()}


def render_html(results: dict[str, ScenarioCounts], title: str = "Cucumber Report") -> str:
    template = _env.from_string(HTML_TEMPLATE)
    return template.render(
        title=title,
        columns=COLUMNS,
        results=results,
        separator=MESSAGE_SEPARATOR,
    )


def write_html(
    results: dict[str, ScenarioCounts],
    prefix: str,
    output_dir=".",
    fs: FileSystem | None = None,
) -> Path:
    """Render the aggregate as an HTML table.

    Raises:
        SinkWriteFailure: If the file cannot be written.
    """
    fs = fs or OSFileSystem()
    path = html_output_path(prefix, output_dir)
    html = render_html(results, title=f"{prefix} results")
    try:
        fs.write_bytes(path, html.encode("utf-8"))
    except OSError as e:
        raise SinkWriteFailure("html", path, str(e)) from e
    logger.debug(f"Wrote {path}")
    return path


def format_console_lines(results: dict[str, ScenarioCounts]) -> list[str]:
    lines = [" | ".join(COLUMNS)]
    for name, counts in results.items():
        lines.append(
            f"{name} | {counts.passed} | {counts.pending} | {counts.failed} | "
            f"{counts.skipped} | {MESSAGE_SEPARATOR.join(counts.messages)}"
        )
    return lines


def print_console(results: dict[str, ScenarioCounts], file: IO | None = None) -> None:
    """Print a pipe-delimited table to stdout (or ``file``)."""
    for line in format_console_lines(results):
        click.echo(line, file=file)


def emit_all(
    results: dict[str, ScenarioCounts],
    prefix: str,
    output_dir=".",
    fs: FileSystem | None = None,
    file: IO | None = None,
) -> list[Path]:
    """Run all sinks in order.

    Returns:
        Paths of the files written.

    Raises:
        SinkWriteFailure: From the first sink that fails.
    """
    written = [write_json(results, prefix, output_dir, fs)]
    written.append(write_html(results, prefix, output_dir, fs))
    print_console(results, file=file)
    return written
