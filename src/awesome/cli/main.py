"""awesome CLI - Main entry point."""

from pathlib import Path

import click

from awesome import __version__
from awesome.plugins import PluginEntry, invoke_plugin

from .context import AppContext, get_app, pass_app

CLI_VERSION = f"v{__version__}"


def _plugin_command(entry: PluginEntry) -> click.Command:
    """Wrap a discovered executable as a click command.

    All arguments, including ``--help``, are passed through to the plugin.
    """

    @click.command(
        name=entry.command,
        help=f"Runs the {entry.command} plugin",
        add_help_option=False,
        context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
    )
    @click.argument("args", nargs=-1, type=click.UNPROCESSED)
    @pass_app
    def run_plugin(app: AppContext, args):
        invoke_plugin(entry, args, launcher=app.launcher, verbose=app.verbose)

    return run_plugin


class PluginGroup(click.Group):
    """Command group that also exposes registered plugins.

    Built-in commands win over plugins with the same name.
    """

    def list_commands(self, ctx):
        names = set(super().list_commands(ctx))
        names.update(get_app(ctx).registry.commands())
        return sorted(names)

    def get_command(self, ctx, cmd_name):
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        entry = get_app(ctx).registry.get(cmd_name)
        if entry is None:
            return None
        return _plugin_command(entry)


@click.group(cls=PluginGroup)
@click.option(
    "--verbose", "-v", is_flag=True, default=False, is_eager=True, help="Enable verbose output"
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    is_eager=True,
    help="Path to config YAML (default: ~/.awesome/config.yaml)",
)
@click.version_option(version=__version__, prog_name="awesome")
@click.pass_context
def cli(ctx, verbose, config_path):
    """awesome - developer command-line utilities.

    Executables named awesome-<name> found in the plugin directories or on
    PATH are available as subcommands.
    """
    get_app(ctx, initialize=True)


@cli.command()
def version():
    """Print the version number of the CLI."""
    click.echo(f"CLI Version {CLI_VERSION}")


from .plugin_commands import list_plugins  # noqa: E402
from .report_commands import report  # noqa: E402
from .status_commands import status_server  # noqa: E402
from .tool_commands import pycharm, python_check, test_run  # noqa: E402

cli.add_command(list_plugins)
cli.add_command(report)
cli.add_command(pycharm)
cli.add_command(python_check)
cli.add_command(test_run)
cli.add_command(status_server)


if __name__ == "__main__":
    cli()
