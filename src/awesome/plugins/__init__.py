"""Plugin system exposing external ``awesome-*`` executables as subcommands."""

from .launcher import PluginOutcome, ProcessLauncher, invoke_plugin
from .registry import (
    PluginEntry,
    PluginRegistry,
    build_registry,
    discover_and_register,
    scan_directory,
    scan_order,
    search_path_dirs,
)

__all__ = [
    "PluginEntry",
    "PluginOutcome",
    "PluginRegistry",
    "ProcessLauncher",
    "build_registry",
    "discover_and_register",
    "invoke_plugin",
    "scan_directory",
    "scan_order",
    "search_path_dirs",
]
