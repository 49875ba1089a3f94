import json
from pathlib import Path

from click.testing import CliRunner

from hookscope.cli.main import cli

EXAMPLE = Path(__file__).resolve().parents[1] / "examples" / "login_form"
SUITE = EXAMPLE / "suite.py"
CONFIG = EXAMPLE / "hookscope.yaml"


def test_cli_help_short_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "run" in result.output


def test_cli_runs_passing_suite() -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli, ["run", "--suite", str(SUITE), "--config", str(CONFIG), "--no-color"]
    )
    assert result.exit_code == 0, result.output
    assert "Login: shows the logo  ✅" in result.output
    assert "Summary: total=2 passed=2 failed=0" in result.output


def test_cli_failing_suite_exits_non_zero_and_streams_observer(tmp_path) -> None:
    observer = tmp_path / "observer.jsonl"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "run",
            "--suite",
            f"{SUITE}:FAILING_SPECS",
            "--config",
            str(CONFIG),
            "--wait-time",
            "200",
            "--observer",
            str(observer),
            "--no-color",
        ],
    )
    assert result.exit_code == 1, result.output
    records = [json.loads(line) for line in observer.read_text(encoding="utf-8").splitlines()]
    assert [record["type"] for record in records] == ["line"] * 4 + ["final"]
    assert records[-1]["payload"]["errorCount"] == 1


def test_cli_json_report(tmp_path) -> None:
    report_path = tmp_path / "report.json"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "run",
            "--suite",
            str(SUITE),
            "--config",
            str(CONFIG),
            "--report",
            "json",
            "--report-path",
            str(report_path),
        ],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert payload["summary"]["total"] == 2


def test_cli_reports_bad_suite() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--suite", "hookscope.version"])
    assert result.exit_code != 0
    assert "create_host" in result.output
