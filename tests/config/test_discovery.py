"""Tests for budgetgraph.toml discovery and loading."""

from pathlib import Path

import pytest

from budgetgraph.config.discovery import CONFIG_ENV_VAR, find_config, load_config
from budgetgraph.domain.types import TraversalMode


@pytest.fixture(autouse=True)
def _no_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_found_in_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / "budgetgraph.toml").write_text("")
        assert find_config(tmp_path) == (tmp_path / "budgetgraph.toml").resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / "budgetgraph.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == (tmp_path / "budgetgraph.toml").resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text("")
        (tmp_path / "budgetgraph.toml").write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config(tmp_path) == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        cfg = load_config(tmp_path / "missing" / "budgetgraph.toml", tmp_path)
        assert cfg.traversal.default_mode is TraversalMode.BFS

    def test_loads_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "budgetgraph.toml"
        path.write_text('[traversal]\ndefault_mode = "dfs"\n')
        assert load_config(path).traversal.default_mode is TraversalMode.DFS

    def test_discovers_from_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "budgetgraph.toml").write_text("[spending]\ndecimal_places = 4\n")
        assert load_config(cwd=tmp_path).spending.decimal_places == 4
