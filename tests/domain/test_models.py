"""Tests for budget record models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from budgetgraph.domain.models import Category, Expense, Goal
from budgetgraph.domain.types import TraversalMode


class TestExpense:
    def test_amount_parsed_as_decimal(self) -> None:
        e = Expense(id=1, user_id=2, category_id=3, amount="12.50")  # type: ignore[arg-type]
        assert e.amount == Decimal("12.50")

    def test_optional_fields_default(self) -> None:
        e = Expense(id=1, user_id=2, category_id=3, amount=Decimal("1"))
        assert e.budget_id == 0
        assert e.date is None
        assert e.description == ""

    def test_frozen(self) -> None:
        e = Expense(id=1, user_id=2, category_id=3, amount=Decimal("1"))
        with pytest.raises(ValidationError):
            e.amount = Decimal("2")  # type: ignore[misc]

    def test_date(self) -> None:
        e = Expense(id=1, user_id=2, category_id=3, amount=Decimal("1"), date="2024-03-01")  # type: ignore[arg-type]
        assert e.date == date(2024, 3, 1)


class TestGoal:
    def test_completed_when_target_reached(self) -> None:
        g = Goal(id=1, user_id=1, name="Car", target_amount=Decimal("100"), current_amount=Decimal("100"))
        assert g.is_completed

    def test_not_completed(self) -> None:
        g = Goal(id=1, user_id=1, name="Car", target_amount=Decimal("100"))
        assert not g.is_completed


class TestCategory:
    def test_defaults(self) -> None:
        assert Category(id=4, name="Food").description == ""


class TestTraversalMode:
    def test_values(self) -> None:
        assert TraversalMode("bfs") is TraversalMode.BFS
        assert TraversalMode.DFS == "dfs"
