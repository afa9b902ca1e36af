"""Shared pytest fixtures and test helpers for budgetgraph tests."""

from __future__ import annotations

from collections.abc import Generator
from decimal import Decimal
from pathlib import Path

import pytest
from click.testing import CliRunner

from budgetgraph.domain.graph import GraphStore
from budgetgraph.domain.models import Expense
from budgetgraph.infrastructure.memory import InMemoryExpenseSource
from budgetgraph.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _telemetry_off() -> Generator[None]:
    """Keep verbose CLI runs from leaking telemetry into later tests."""
    disable_telemetry()
    yield
    disable_telemetry()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no budgetgraph.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_config")``.
    """
    monkeypatch.delenv("BUDGETGRAPH_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def diamond() -> GraphStore:
    """Directed diamond: 1 -> 2, 1 -> 3, 2 -> 4, 3 -> 4."""
    return GraphStore.from_edges([(1, 2), (1, 3), (2, 4), (3, 4)], directed=True)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_expense(expense_id: int, category_id: int, amount: str, *, user_id: int = 1) -> Expense:
    return Expense(
        id=expense_id,
        user_id=user_id,
        category_id=category_id,
        amount=Decimal(amount),
    )


def expense_source(*rows: tuple[int, str], user_id: int = 1) -> InMemoryExpenseSource:
    """Expenses from ``(category_id, amount)`` rows, ids assigned in order."""
    return InMemoryExpenseSource(
        make_expense(i, cat, amount, user_id=user_id) for i, (cat, amount) in enumerate(rows, 1)
    )
