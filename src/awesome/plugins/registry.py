"""Plugin discovery from directories and the executable search path.

Any file named ``<prefix><command>`` in a scanned directory becomes the
subcommand ``<command>``. Directories are scanned in priority order and the
first directory to provide a command keeps it.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from awesome.config.models import PluginConfig
from awesome.errors import DirectoryUnreadable
from awesome.utils.fs import FileSystem, OSFileSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PluginEntry:
    """A discovered plugin executable."""

    name: str
    path: str
    command: str


class PluginRegistry:
    """Plugins keyed by command name, in discovery order."""

    def __init__(self) -> None:
        self._entries: dict[str, PluginEntry] = {}

    def register(self, directory, file_name: str, prefix: str) -> bool:
        """Register ``file_name`` found in ``directory``.

        Returns:
            False if the command was already registered, in which case the
            existing entry is kept untouched.
        """
        command = file_name[len(prefix):] if file_name.startswith(prefix) else file_name
        if not command or command in self._entries:
            return False
        self._entries[command] = PluginEntry(
            name=file_name,
            path=str(Path(directory) / file_name),
            command=command,
        )
        return True

    def get(self, command: str) -> PluginEntry | None:
        return self._entries.get(command)

    def entries(self) -> list[PluginEntry]:
        return list(self._entries.values())

    def commands(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, command: object) -> bool:
        return command in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def scan_directory(
    registry: PluginRegistry,
    directory,
    prefix: str,
    fs: FileSystem,
    verbose: bool = False,
) -> int:
    """Register every ``prefix``-named file in ``directory``.

    Returns:
        Number of newly registered plugins. An unreadable directory
        contributes zero.
    """
    try:
        entries = fs.list_dir(directory)
    except DirectoryUnreadable as e:
        if verbose:
            logger.warning(f"Failed to read plugin directory: {e.path}: {e.reason}")
        return 0

    added = 0
    for entry in entries:
        if entry.is_dir or not entry.name.startswith(prefix):
            continue
        if registry.register(directory, entry.name, prefix):
            added += 1
            if verbose:
                logger.info(f"Loaded plugin: {entry.name}")
    return added


def search_path_dirs(environ: Mapping[str, str], variable: str = "PATH") -> list[str]:
    """Directories listed in the executable search path, in order."""
    value = environ.get(variable, "")
    return [d for d in value.split(os.pathsep) if d]


def scan_order(
    config: PluginConfig,
    environ: Mapping[str, str] | None = None,
) -> list[tuple[str, str]]:
    """Build the ``(directory, prefix)`` scan list in priority order.

    Primary plugin directory, then the conditional directory, then each
    directory on the search path.
    """
    environ = os.environ if environ is None else environ
    order = [
        (str(config.plugin_dir.expanduser()), config.prefix),
        (str(config.conditional_dir.expanduser()), config.conditional_prefix),
    ]
    for directory in search_path_dirs(environ, config.search_path_env):
        order.append((directory, config.prefix))
    return order


def discover_and_register(
    directories: Iterable[tuple[str, str]],
    fs: FileSystem | None = None,
    verbose: bool = False,
    registry: PluginRegistry | None = None,
) -> PluginRegistry:
    """Scan ``directories`` in order into ``registry`` (or a new one).

    Args:
        directories: ``(directory, prefix)`` pairs in priority order.
        fs: Filesystem to list directories with. Defaults to the real disk.
        verbose: Log unreadable directories and loaded plugins.
        registry: Existing registry to extend.

    Returns:
        The populated registry.
    """
    fs = fs or OSFileSystem()
    registry = registry if registry is not None else PluginRegistry()
    for directory, prefix in directories:
        scan_directory(registry, directory, prefix, fs, verbose=verbose)
    logger.debug(f"Plugin registry holds {len(registry)} command(s)")
    return registry


def build_registry(
    config: PluginConfig,
    environ: Mapping[str, str] | None = None,
    fs: FileSystem | None = None,
    verbose: bool = False,
) -> PluginRegistry:
    """Discover all plugins for ``config`` using the standard scan order."""
    return discover_and_register(scan_order(config, environ), fs=fs, verbose=verbose)
