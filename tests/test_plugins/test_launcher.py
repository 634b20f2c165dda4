"""Tests for plugin execution."""

import logging
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from awesome.errors import PluginLaunchFailure
from awesome.plugins.launcher import ProcessLauncher, invoke_plugin
from awesome.plugins.registry import PluginEntry


@pytest.fixture
def entry():
    return PluginEntry(name="awesome-build", path="/plugins/awesome-build", command="build")


class TestProcessLauncher:
    @patch("awesome.plugins.launcher.subprocess.run")
    def test_returns_exit_code(self, mock_run):
        mock_run.return_value = MagicMock(returncode=3)
        launcher = ProcessLauncher()
        assert launcher.run("/bin/tool", ["--flag", "x"]) == 3
        mock_run.assert_called_once_with(["/bin/tool", "--flag", "x"], stdout=None, stderr=None)

    @patch("awesome.plugins.launcher.subprocess.run", side_effect=FileNotFoundError(2, "No such file"))
    def test_launch_error_raises(self, mock_run):
        with pytest.raises(PluginLaunchFailure, match="No such file"):
            ProcessLauncher().run("/missing", [])

    @patch("awesome.plugins.launcher.subprocess.run")
    def test_no_timeout(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0)
        ProcessLauncher().run("/bin/tool", [])
        assert "timeout" not in mock_run.call_args.kwargs

    def test_runs_real_executable(self, tmp_path):
        script = tmp_path / "awesome-hello"
        script.write_text("#!/bin/sh\nexit 7\n")
        script.chmod(0o755)
        assert ProcessLauncher().run(str(script), [], stdout=subprocess.DEVNULL) == 7


class TestInvokePlugin:
    def test_success(self, entry):
        launcher = MagicMock()
        launcher.run.return_value = 0
        outcome = invoke_plugin(entry, ("a", "b"), launcher=launcher)
        assert outcome.succeeded
        launcher.run.assert_called_once_with(entry.path, ["a", "b"], stdout=None, stderr=None)

    def test_nonzero_exit_is_not_raised(self, entry):
        launcher = MagicMock()
        launcher.run.return_value = 2
        outcome = invoke_plugin(entry, [], launcher=launcher)
        assert outcome.exit_code == 2
        assert not outcome.succeeded

    def test_launch_failure_is_contained(self, entry):
        launcher = MagicMock()
        launcher.run.side_effect = PluginLaunchFailure(entry.path, "permission denied")
        outcome = invoke_plugin(entry, [], launcher=launcher)
        assert outcome.exit_code is None
        assert outcome.error is not None

    def test_failure_reported_when_verbose(self, entry, caplog):
        launcher = MagicMock()
        launcher.run.side_effect = PluginLaunchFailure(entry.path, "permission denied")
        with caplog.at_level(logging.DEBUG, logger="awesome"):
            invoke_plugin(entry, [], launcher=launcher, verbose=True)
        assert "Executing plugin at: /plugins/awesome-build" in caplog.text
        assert "permission denied" in caplog.text

    def test_failure_silent_when_not_verbose(self, entry, caplog):
        launcher = MagicMock()
        launcher.run.return_value = 1
        with caplog.at_level(logging.DEBUG, logger="awesome"):
            invoke_plugin(entry, [], launcher=launcher)
        assert caplog.text == ""
