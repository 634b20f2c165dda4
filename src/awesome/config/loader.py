"""YAML configuration file loading with Pydantic validation."""

import os
from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from .models import AwesomeConfig

T = TypeVar("T", bound=BaseModel)

CONFIG_ENV_VAR = "AWESOME_CONFIG"


def default_config_path() -> Path:
    return Path.home() / ".awesome" / "config.yaml"


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""


def load_yaml(path: Path) -> dict:
    """Load a YAML file and return its contents as a dict.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
            if data is None:
                return {}
            if not isinstance(data, dict):
                raise ConfigError(f"Expected a mapping at the top of {path}")
            return data
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def load_config(path: Path, model_class: type[T]) -> T:
    """Load and validate a YAML config file against a Pydantic model.

    Raises:
        ConfigError: If validation fails.
    """
    data = load_yaml(path)
    try:
        return model_class(**data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {path}: {e}") from e


def load_awesome_config(
    path: Path | None = None,
    environ: dict[str, str] | None = None,
) -> AwesomeConfig:
    """Load the awesome configuration.

    An explicit ``path`` (or ``$AWESOME_CONFIG``) must exist. The default
    ``~/.awesome/config.yaml`` is optional; built-in defaults apply when it
    is absent.
    """
    environ = os.environ if environ is None else environ

    if path is None and environ.get(CONFIG_ENV_VAR):
        path = Path(environ[CONFIG_ENV_VAR])

    if path is not None:
        return load_config(Path(path), AwesomeConfig)

    default_path = default_config_path()
    if default_path.is_file():
        return load_config(default_path, AwesomeConfig)
    return AwesomeConfig()
