"""Plugin listing command."""

import click
from rich.console import Console
from rich.table import Table

from .context import AppContext, pass_app

console = Console()


@click.command("list")
@pass_app
def list_plugins(app: AppContext):
    """Lists all the available plugins."""
    entries = app.registry.entries()
    if not entries:
        console.print("No plugins found.")
        return

    table = Table(title="Available plugins")
    table.add_column("Command", style="cyan")
    table.add_column("File")
    table.add_column("Path")

    for entry in entries:
        table.add_row(entry.command, entry.name, entry.path)

    console.print(table)
