"""Tests for BudgetGraphSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from budgetgraph.config.settings import BudgetGraphSettings
from budgetgraph.domain.types import TraversalMode


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "BUDGETGRAPH_CONFIG",
        "BUDGETGRAPH_TRAVERSAL__DEFAULT_MODE",
        "BUDGETGRAPH_QUIET",
    ):
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = BudgetGraphSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.traversal.default_mode is TraversalMode.BFS

    def test_frozen(self, tmp_path: Path) -> None:
        settings = BudgetGraphSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "budgetgraph.toml").write_text(
            '[traversal]\ndefault_mode = "dfs"\n[goals]\nreport_self_loops = false\n'
        )
        settings = BudgetGraphSettings.from_cli(start=tmp_path)
        assert settings.traversal.default_mode is TraversalMode.DFS
        assert settings.goals.report_self_loops is False
        assert settings.spending.decimal_places == 2

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text("[spending]\ndecimal_places = 3\n")
        settings = BudgetGraphSettings.from_cli(config_path=str(custom))
        assert settings.spending.decimal_places == 3
        assert settings.config_path == custom

    def test_explicit_missing_path_ignored(self, tmp_path: Path) -> None:
        settings = BudgetGraphSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "budgetgraph.toml").write_text("[traversal\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            BudgetGraphSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "budgetgraph.toml").write_text('[traversal]\ndefault_mode = "bfs"\n')
        monkeypatch.setenv("BUDGETGRAPH_TRAVERSAL__DEFAULT_MODE", "dfs")
        settings = BudgetGraphSettings.from_cli(start=tmp_path)
        assert settings.traversal.default_mode is TraversalMode.DFS

    def test_cli_flag_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUDGETGRAPH_QUIET", "true")
        settings = BudgetGraphSettings.from_cli(start=tmp_path, quiet=False)
        assert settings.quiet is False


class TestAsConfig:
    def test_sections_copied(self, tmp_path: Path) -> None:
        (tmp_path / "budgetgraph.toml").write_text("[spending]\ndecimal_places = 1\n")
        cfg = BudgetGraphSettings.from_cli(start=tmp_path).as_config()
        assert cfg.spending.decimal_places == 1
        assert cfg.traversal.default_mode is TraversalMode.BFS
