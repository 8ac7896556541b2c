"""Tests for the lazyeval command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from lazyeval._cli.main import app

runner = CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run commands from a directory with its own pyproject.toml."""
    (tmp_path / "pyproject.toml").write_text("[tool.lazyeval]\nruns = 3\nchain_depth = 500\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestStrategiesCommand:
    """Tests for the strategies command."""

    def test_table_output(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["strategies"])

        assert result.exit_code == 0, result.output
        for name in ("eager", "memoized", "unmemoized", "deferred"):
            assert name in result.output

    def test_json_uses_configured_runs(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["strategies", "--json"])

        assert result.exit_code == 0, result.output
        reports = json.loads(result.stdout)
        assert [report["triggers"] for report in reports] == [3, 3, 3, 3]
        assert {report["strategy"]: report["calls"] for report in reports} == {
            "eager": 1,
            "memoized": 1,
            "unmemoized": 3,
            "deferred": 3,
        }

    def test_runs_option_overrides_config(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["strategies", "--json", "--runs", "6"])

        assert result.exit_code == 0, result.output
        reports = json.loads(result.stdout)
        assert all(report["triggers"] == 6 for report in reports)

    def test_rejects_zero_runs(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["strategies", "--runs", "0"])

        assert result.exit_code != 0


class TestChainCommand:
    """Tests for the chain command."""

    def test_uses_configured_depth(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["chain"])

        assert result.exit_code == 0, result.output
        assert "Resolved 500 links: result = 500" in result.output

    def test_depth_option(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["chain", "--depth", "100000"])

        assert result.exit_code == 0, result.output
        assert "result = 100000" in result.output


class TestInvalidConfig:
    """Tests for reporting configuration errors."""

    def test_exits_with_error(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.lazyeval]\nruns = 0\n")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["strategies"])

        assert result.exit_code == 1
        assert "expected positive integer" in result.output
