"""Locate and launch a PyCharm installation."""

import logging
import os
import platform
import subprocess
from collections.abc import MutableMapping
from pathlib import Path

from awesome.utils.fs import FileSystem, OSFileSystem

logger = logging.getLogger(__name__)

PYCHARM_ENV_VAR = "PYCHARM_PATH"
PYCHARM_GLOB = "PyCharm*"


class PyCharmLaunchError(Exception):
    """Raised when a located PyCharm cannot be started."""


def get_search_paths(system: str, environ: MutableMapping[str, str]) -> list[str]:
    """Install locations to search on ``system`` (a ``platform.system()`` value)."""
    system = system.lower()
    home = environ.get("HOME", str(Path.home()))
    if system == "windows":
        return [
            os.path.join(environ.get("PROGRAMFILES", ""), "JetBrains"),
            os.path.join(environ.get("PROGRAMFILES(X86)", ""), "JetBrains"),
            os.path.join(environ.get("LOCALAPPDATA", ""), "JetBrains"),
        ]
    if system == "darwin":
        return ["/Applications/", os.path.join(home, "Applications")]
    if system == "linux":
        return ["/usr/local/bin/", "/opt/", os.path.join(home, ".local/share/JetBrains")]
    return []


class PyCharmFinder:
    """Finds PyCharm, caching the result in a small file."""

    def __init__(
        self,
        cache_file: Path = Path(".env-pycharm"),
        fs: FileSystem | None = None,
        environ: MutableMapping[str, str] | None = None,
        system: str | None = None,
    ) -> None:
        self.cache_file = Path(cache_file)
        self.fs = fs or OSFileSystem()
        self.environ = os.environ if environ is None else environ
        self.system = system or platform.system()

    def load_cached(self) -> str:
        try:
            return self.fs.read_bytes(self.cache_file).decode("utf-8").strip()
        except OSError:
            return ""

    def save(self, path: str) -> None:
        try:
            self.fs.write_bytes(self.cache_file, path.encode("utf-8"))
        except OSError as e:
            logger.warning(f"Could not cache PyCharm location in {self.cache_file}: {e}")
        self.environ[PYCHARM_ENV_VAR] = path

    def search(self, paths: list[str]) -> str:
        for directory in paths:
            found = self.fs.glob(directory, PYCHARM_GLOB)
            if found:
                return found[0]
        return ""

    def find(self) -> str:
        """Return the PyCharm location, or an empty string if not found."""
        cached = self.load_cached()
        if cached:
            return cached

        found = self.search(get_search_paths(self.system, self.environ))
        if found:
            self.save(found)
        return found


def describe_location(location: str, short: bool = False) -> str:
    if short:
        return "✔️ PyCharm found." if location else "❌ PyCharm not found."
    return f"PyCharm Location: {location}" if location else "PyCharm not found."


def launch_command(path: str, system: str) -> list[str]:
    if system.lower() == "windows":
        return ["cmd", "/C", path]
    return ["open", path]


def launch_pycharm(finder: PyCharmFinder) -> str:
    """Start PyCharm without waiting for it.

    Returns:
        The path launched, or an empty string when PyCharm was not found.

    Raises:
        PyCharmLaunchError: If the launch command cannot be started.
    """
    path = finder.environ.get(PYCHARM_ENV_VAR, "") or finder.find()
    if not path:
        return ""
    command = launch_command(path, finder.system)
    try:
        subprocess.Popen(command)
    except OSError as e:
        logger.warning(f"Failed to launch PyCharm with {command}: {e}")
        raise PyCharmLaunchError(f"Failed to launch PyCharm from {path}: {e.strerror or e}") from e
    return path
