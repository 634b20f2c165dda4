"""Helper tool commands: pycharm, python-check, test-run."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from awesome.tools.container import (
    ContainerRunConfig,
    ContainerRunError,
    load_env_file,
    run_team_tests,
)
from awesome.tools.pycharm import (
    PyCharmFinder,
    PyCharmLaunchError,
    describe_location,
    launch_pycharm,
)
from awesome.tools.python_check import (
    MINIMUM_VERSION,
    PythonCheckError,
    is_version_at_least,
    parse_python_version,
    read_python_version,
)

from .context import AppContext, pass_app

console = Console()


@click.command()
@click.option("--short", is_flag=True, help="Output in short format")
@click.option("--launch", is_flag=True, help="Launch PyCharm")
@pass_app
def pycharm(app: AppContext, short, launch):
    """Locate (or launch) a PyCharm installation."""
    finder = PyCharmFinder(
        cache_file=app.config.pycharm.cache_file,
        fs=app.fs,
        environ=app.environ,
    )

    if launch:
        click.echo("Locating PyCharm...")
        try:
            path = launch_pycharm(finder)
        except PyCharmLaunchError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise SystemExit(1)
        if path:
            click.echo(f"Launching PyCharm from {path}...")
        else:
            click.echo("PyCharm not found.")
        return

    click.echo(describe_location(finder.find(), short=short))


@click.command("python-check")
@click.option("--python", "executable", default="python", help="Python executable to check")
def python_check(executable):
    """Check that Python 3.10 or newer is installed."""
    try:
        version = parse_python_version(read_python_version(executable))
    except PythonCheckError as e:
        click.echo(str(e))
        raise SystemExit(1)

    click.echo(f"Installed Python version: {version}")
    if not is_version_at_least(version):
        click.echo(f"Python version is below {MINIMUM_VERSION}")
        raise SystemExit(1)
    click.echo(f"Python version is {MINIMUM_VERSION} or higher.")


@click.command("test-run")
@click.option("--team", default="", help="Specify the team to run tests for")
@click.option(
    "--env-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Environment file to load (default: .env)",
)
@pass_app
def test_run(app: AppContext, team, env_file):
    """Run a team's test suite in a container."""
    if not team:
        click.echo("Please specify a team using the --team flag")
        raise SystemExit(1)

    settings = app.config.container
    try:
        load_env_file(env_file or settings.env_file, app.environ)
        run_team_tests(
            team,
            settings.team_commands,
            ContainerRunConfig.from_environ(app.environ),
            launcher=app.launcher,
            engine=settings.engine,
        )
    except ContainerRunError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)
