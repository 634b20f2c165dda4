"""Pydantic models for awesome configuration."""

from pathlib import Path

from pydantic import BaseModel, Field


def _default_team_commands() -> dict[str, str]:
    return {
        "abc": "npm run ",
        "def": "npm run ",
        "foo": "npm run ",
    }


class PluginConfig(BaseModel):
    """Where and how plugin executables are discovered."""

    plugin_dir: Path = Field(default_factory=lambda: Path.home() / ".foo" / "plugins")
    prefix: str = "awesome-"
    conditional_dir: Path = Path("/path/to/other/plugins")
    conditional_prefix: str = "awesome-"
    search_path_env: str = "PATH"


class ReporterConfig(BaseModel):
    """Defaults for the report aggregator."""

    prefix: str = "cucumber_report"
    directory: Path = Path(".")
    output_dir: Path = Path(".")


class PyCharmConfig(BaseModel):
    """PyCharm locator settings."""

    cache_file: Path = Path(".env-pycharm")


class ContainerConfig(BaseModel):
    """Container test runner settings."""

    engine: str = "podman"
    env_file: Path = Path(".env")
    team_commands: dict[str, str] = Field(default_factory=_default_team_commands)


class StatusServerConfig(BaseModel):
    """Pod status proxy settings."""

    host: str = "0.0.0.0"
    port: int = Field(default=8081, ge=1, le=65535)


class AwesomeConfig(BaseModel):
    """Top-level configuration for the awesome CLI."""

    plugins: PluginConfig = Field(default_factory=PluginConfig)
    reporter: ReporterConfig = Field(default_factory=ReporterConfig)
    pycharm: PyCharmConfig = Field(default_factory=PyCharmConfig)
    container: ContainerConfig = Field(default_factory=ContainerConfig)
    status_server: StatusServerConfig = Field(default_factory=StatusServerConfig)
