"""Tests for the report command."""

import json

from click.testing import CliRunner

from awesome.cli.context import AppContext
from awesome.cli.main import cli
from awesome.config.models import AwesomeConfig
from awesome.plugins.registry import PluginRegistry

HEADER = "Scenario Name | Passed | Pending | Failed | Skipped | Error Messages"


def _app():
    return AppContext(config=AwesomeConfig(), registry=PluginRegistry())


def _write_report(path, scenario, *statuses):
    steps = [{"result": {"status": s, "error_message": f"{s} step"}} for s in statuses]
    path.write_text(json.dumps([{"elements": [{"name": scenario, "steps": steps}]}]))


class TestReportCommand:
    def test_aggregates_and_writes_outputs(self, tmp_path):
        reports = tmp_path / "reports"
        reports.mkdir()
        out = tmp_path / "out"
        out.mkdir()
        _write_report(reports / "bc_1.json", "Login", "passed")
        _write_report(reports / "bc_2.json", "Login", "failed")
        _write_report(reports / "other.json", "Ignored", "failed")

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["report", "--dir", str(reports), "--prefix", "bc", "--output-dir", str(out)],
            obj=_app(),
        )

        assert result.exit_code == 0
        assert HEADER in result.output
        assert "Login | 1 | 0 | 1 | 0 | failed step" in result.output
        assert "Ignored" not in result.output

        data = json.loads((out / "bc_aggregated_results.json").read_text())
        assert data == {
            "Login": {
                "passed": 1,
                "pending": 0,
                "failed": 1,
                "skipped": 0,
                "messages": ["failed step"],
            }
        }
        assert (out / "bc_report.html").exists()

    def test_missing_directory_prints_header_only(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "report",
                "--dir",
                str(tmp_path / "missing"),
                "--output-dir",
                str(tmp_path),
            ],
            obj=_app(),
        )
        assert result.exit_code == 0
        assert result.output.strip() == HEADER
        written = json.loads((tmp_path / "cucumber_report_aggregated_results.json").read_text())
        assert written == {}

    def test_default_directory_is_cwd(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            with open("cucumber_report_1.json", "w") as f:
                json.dump([{"elements": [{"name": "S", "steps": [{"result": {"status": "passed"}}]}]}], f)
            result = runner.invoke(cli, ["report"], obj=_app())
            assert result.exit_code == 0
            assert "S | 1 | 0 | 0 | 0 | " in result.output
            with open("cucumber_report_aggregated_results.json") as f:
                assert json.load(f)["S"]["passed"] == 1

    def test_sink_failure_exits_nonzero(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["report", "--dir", str(tmp_path), "--output-dir", str(tmp_path / "no" / "such")],
            obj=_app(),
        )
        assert result.exit_code == 1
        assert "Failed to output results" in result.output
        assert HEADER not in result.output
