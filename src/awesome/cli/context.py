"""Shared state handed to every awesome command."""

import logging
import os
import sys
from collections.abc import MutableMapping
from pathlib import Path

import click

from awesome.config import AwesomeConfig, ConfigError, load_awesome_config
from awesome.plugins import PluginRegistry, ProcessLauncher, build_registry
from awesome.utils.fs import FileSystem, OSFileSystem

_LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def setup_logging(verbose: bool) -> None:
    """Send awesome log records to stderr; DEBUG when verbose, WARNING otherwise."""
    package_logger = logging.getLogger("awesome")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in package_logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.stream = sys.stderr
            return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger.addHandler(handler)


class AppContext:
    """Configuration, plugin registry and IO capabilities for one invocation.

    The registry is built on first use and then reused for the rest of the
    invocation.
    """

    def __init__(
        self,
        config: AwesomeConfig | None = None,
        registry: PluginRegistry | None = None,
        fs: FileSystem | None = None,
        launcher: ProcessLauncher | None = None,
        environ: MutableMapping[str, str] | None = None,
        verbose: bool = False,
        config_path: Path | None = None,
    ):
        self._config = config
        self._registry = registry
        self.fs = fs or OSFileSystem()
        self.launcher = launcher or ProcessLauncher()
        self.environ = os.environ if environ is None else environ
        self.verbose = verbose
        self.config_path = config_path
        self.initialized = False

    @property
    def config(self) -> AwesomeConfig:
        if self._config is None:
            try:
                self._config = load_awesome_config(self.config_path, self.environ)
            except ConfigError as e:
                raise click.ClickException(str(e)) from e
        return self._config

    @property
    def registry(self) -> PluginRegistry:
        if self._registry is None:
            self._registry = build_registry(
                self.config.plugins,
                environ=self.environ,
                fs=self.fs,
                verbose=self.verbose,
            )
        return self._registry


pass_app = click.make_pass_decorator(AppContext, ensure=True)


def get_app(ctx: click.Context, initialize: bool = False) -> AppContext:
    """Return the AppContext for ``ctx``, applying the global options parsed so far.

    Eager callbacks such as ``--help`` can reach this before the group
    callback runs; only the group callback passes ``initialize=True`` and
    freezes the options.
    """
    app = ctx.ensure_object(AppContext)
    if not app.initialized:
        app.verbose = app.verbose or bool(ctx.params.get("verbose"))
        if ctx.params.get("config_path") is not None:
            app.config_path = ctx.params["config_path"]
        setup_logging(app.verbose)
        app.initialized = initialize
    return app
