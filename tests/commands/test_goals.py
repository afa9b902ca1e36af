"""Tests for the goals command group."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from budgetgraph.cli import cli


def _cycles(cli_runner: CliRunner, *args: str) -> dict:
    result = cli_runner.invoke(cli, ["--json", "goals", "cycles", *args])
    assert result.exit_code == 0
    return json.loads(result.stdout)


@pytest.mark.usefixtures("_isolated_config")
class TestGoalsCycles:
    def test_mutual_dependency(self, cli_runner: CliRunner) -> None:
        data = _cycles(cli_runner, "-d", "1:2", "-d", "2:1")["data"]
        assert data["cycles"] == [[1, 2]]
        assert data["has_cycles"] is True

    def test_acyclic(self, cli_runner: CliRunner) -> None:
        data = _cycles(cli_runner, "-d", "1:2", "-d", "2:3")["data"]
        assert data["count"] == 3
        assert data["cycles"] == []
        assert data["has_cycles"] is False

    def test_known_goal_without_dependencies(self, cli_runner: CliRunner) -> None:
        payload = _cycles(cli_runner, "-d", "1:2", "--goal", "1", "--goal", "2", "--goal", "3")
        assert payload["data"]["count"] == 3
        assert [3] in payload["data"]["components"]
        assert payload["warnings"] == []

    def test_unknown_goal_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["goals", "cycles", "-d", "1:9", "--goal", "1"])
        assert result.exit_code == 0
        assert "WARNING: Unknown goal id 9 in dependencies" in result.stderr

    def test_self_loop_reported(self, cli_runner: CliRunner) -> None:
        assert _cycles(cli_runner, "-d", "4:4")["data"]["cycles"] == [[4]]

    def test_self_loop_policy_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "budgetgraph.toml").write_text("[goals]\nreport_self_loops = false\n")
        assert _cycles(cli_runner, "-d", "4:4")["data"]["cycles"] == []

    def test_negative_goal_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "goals", "cycles", "-d", "-1:2"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["detail"] == {"goal_ids": [-1]}

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["goals", "cycles", "-d", "1:2", "-d", "2:1"])
        assert "SCC 1: {1, 2}" in result.stdout
        assert "1 circular group(s) found" in result.stdout

    def test_quiet_lists_components(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "goals", "cycles", "-d", "1:2", "-d", "2:1"])
        assert result.stdout.strip() == "1 2"
