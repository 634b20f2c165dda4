"""Run a team's test suite inside a container."""

import logging
import os
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from awesome.errors import PluginLaunchFailure
from awesome.plugins.launcher import ProcessLauncher

logger = logging.getLogger(__name__)

CONTAINER_REPORTS_PATH = "/app/src/reports"


class ContainerRunError(Exception):
    """Raised when the container test run cannot be set up or fails."""


@dataclass
class ContainerRunConfig:
    """Runtime settings read from the environment."""

    reports_path: str
    env_file_path: str
    container_name: str

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "ContainerRunConfig":
        return cls(
            reports_path=environ.get("REPORTS_PATH", ""),
            env_file_path=environ.get("ENV_FILE_PATH", ""),
            container_name=environ.get("CONTAINER_NAME", ""),
        )


def load_env_file(path: Path, environ: MutableMapping[str, str] | None = None) -> None:
    """Load ``path`` into ``environ`` (the process environment by default).

    Variables already set in ``environ`` are not overridden.

    Raises:
        ContainerRunError: If the file does not exist.
    """
    if not Path(path).is_file():
        raise ContainerRunError("Error loading .env file")
    environ = os.environ if environ is None else environ
    for key, value in dotenv_values(path).items():
        if value is not None:
            environ.setdefault(key, value)


def get_command_for_team(team: str, team_commands: Mapping[str, str]) -> str:
    """Look up the test command for ``team``.

    Raises:
        ContainerRunError: If no command is configured for the team.
    """
    if team not in team_commands:
        raise ContainerRunError(f"No command found for team: {team}")
    return team_commands[team]


def build_container_command(
    command: str,
    config: ContainerRunConfig,
    engine: str = "podman",
) -> list[str]:
    return [
        engine,
        "run",
        "-it",
        "--rm",
        "--network=host",
        "-v",
        f"{config.reports_path}:{CONTAINER_REPORTS_PATH}",
        "--env-file",
        config.env_file_path,
        config.container_name,
        command,
    ]


def run_team_tests(
    team: str,
    team_commands: Mapping[str, str],
    config: ContainerRunConfig,
    launcher: ProcessLauncher | None = None,
    engine: str = "podman",
) -> int:
    """Run the container for ``team`` in the foreground.

    Raises:
        ContainerRunError: If the team is unknown or the container fails.
    """
    launcher = launcher or ProcessLauncher()
    argv = build_container_command(get_command_for_team(team, team_commands), config, engine)
    logger.debug(f"Executing: {' '.join(argv)}")

    try:
        exit_code = launcher.run(argv[0], argv[1:])
    except PluginLaunchFailure as e:
        raise ContainerRunError(f"Failed to execute command: {e.reason}") from e
    if exit_code != 0:
        raise ContainerRunError(f"Failed to execute command: exit status {exit_code}")
    return exit_code

