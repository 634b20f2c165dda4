"""Plugin process execution.

Plugins run in the foreground with the host's stdout and stderr. There is no
timeout: a plugin that never exits keeps the host waiting.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import IO, Sequence

from awesome.errors import PluginLaunchFailure

from .registry import PluginEntry

logger = logging.getLogger(__name__)


class ProcessLauncher:
    """Runs external executables and waits for them."""

    def run(
        self,
        path: str,
        args: Sequence[str],
        stdout: IO | None = None,
        stderr: IO | None = None,
    ) -> int:
        """Run ``path`` with ``args`` and return its exit status.

        Raises:
            PluginLaunchFailure: If the executable cannot be started.
        """
        try:
            result = subprocess.run([path, *args], stdout=stdout, stderr=stderr)
        except OSError as e:
            raise PluginLaunchFailure(path, e.strerror or str(e)) from e
        return result.returncode


@dataclass
class PluginOutcome:
    """Result of invoking a plugin."""

    entry: PluginEntry
    exit_code: int | None
    error: PluginLaunchFailure | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.exit_code == 0


def invoke_plugin(
    entry: PluginEntry,
    args: Sequence[str],
    launcher: ProcessLauncher | None = None,
    verbose: bool = False,
    stdout: IO | None = None,
    stderr: IO | None = None,
) -> PluginOutcome:
    """Run a registered plugin with the user's arguments.

    ``stdout``/``stderr`` default to the host process streams. Failures are
    reported through logging when ``verbose`` is set and never raised to the
    caller.
    """
    launcher = launcher or ProcessLauncher()

    if verbose:
        logger.info(f"Executing plugin at: {entry.path}")

    try:
        exit_code = launcher.run(entry.path, list(args), stdout=stdout, stderr=stderr)
    except PluginLaunchFailure as e:
        if verbose:
            logger.error(str(e))
        return PluginOutcome(entry=entry, exit_code=None, error=e)

    if exit_code != 0 and verbose:
        logger.error(f"Error executing plugin {entry.path}: exit status {exit_code}")
    return PluginOutcome(entry=entry, exit_code=exit_code)
