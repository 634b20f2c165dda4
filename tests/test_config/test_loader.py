"""Tests for awesome configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest

from awesome.config.loader import ConfigError, load_awesome_config, load_yaml
from awesome.config.models import AwesomeConfig


@pytest.fixture
def tmp_yaml(tmp_path):
    """Create a temporary YAML file."""

    def _create(content: str, filename: str = "config.yaml") -> Path:
        path = tmp_path / filename
        path.write_text(content)
        return path

    return _create


class TestLoadYaml:
    def test_valid_yaml(self, tmp_yaml):
        path = tmp_yaml("reporter:\n  prefix: bc\n")
        assert load_yaml(path) == {"reporter": {"prefix": "bc"}}

    def test_empty_yaml(self, tmp_yaml):
        assert load_yaml(tmp_yaml("")) == {}

    def test_file_not_found(self):
        with pytest.raises(ConfigError, match="not found"):
            load_yaml(Path("/nonexistent/file.yaml"))

    def test_invalid_yaml(self, tmp_yaml):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_yaml(tmp_yaml("invalid: [yaml: {broken"))

    def test_non_mapping(self, tmp_yaml):
        with pytest.raises(ConfigError, match="mapping"):
            load_yaml(tmp_yaml("- a\n- b\n"))


class TestDefaults:
    def test_original_defaults(self):
        config = AwesomeConfig()
        assert config.plugins.plugin_dir == Path.home() / ".foo" / "plugins"
        assert config.plugins.prefix == "awesome-"
        assert config.plugins.conditional_prefix == "awesome-"
        assert config.reporter.prefix == "cucumber_report"
        assert config.status_server.port == 8081
        assert set(config.container.team_commands) == {"abc", "def", "foo"}


class TestLoadAwesomeConfig:
    def test_explicit_path(self, tmp_yaml):
        path = tmp_yaml("reporter:\n  prefix: bc\nplugins:\n  prefix: tool-\n")
        config = load_awesome_config(path, environ={})
        assert config.reporter.prefix == "bc"
        assert config.plugins.prefix == "tool-"

    def test_env_var_path(self, tmp_yaml):
        path = tmp_yaml("status_server:\n  port: 9000\n")
        config = load_awesome_config(environ={"AWESOME_CONFIG": str(path)})
        assert config.status_server.port == 9000

    def test_explicit_missing_path_is_error(self, tmp_path):
        with pytest.raises(ConfigError):
            load_awesome_config(tmp_path / "missing.yaml", environ={})

    def test_validation_error(self, tmp_yaml):
        path = tmp_yaml("status_server:\n  port: 0\n")
        with pytest.raises(ConfigError, match="validation failed"):
            load_awesome_config(path, environ={})

    def test_missing_default_file_uses_defaults(self, tmp_path):
        with patch(
            "awesome.config.loader.default_config_path",
            return_value=tmp_path / "none.yaml",
        ):
            config = load_awesome_config(environ={})
        assert config == AwesomeConfig()
