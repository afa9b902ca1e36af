"""In-memory record sources for the category and goal services.

The application persists expenses and goals elsewhere; these sources
serve the CLI and tests, and document the shape services expect.
"""

from __future__ import annotations

from collections.abc import Iterable

from budgetgraph.domain.models import Expense, Goal


class InMemoryExpenseSource:
    """Expenses held in a list, filtered per user on read."""

    def __init__(self, expenses: Iterable[Expense] = ()) -> None:
        self._expenses: list[Expense] = list(expenses)

    def add(self, expense: Expense) -> None:
        self._expenses.append(expense)

    def list_expenses_for_user(self, user_id: int) -> list[Expense]:
        return [e for e in self._expenses if e.user_id == user_id]


class InMemoryGoalSource:
    """Goals keyed by id; later inserts replace earlier ones."""

    def __init__(self, goals: Iterable[Goal] = ()) -> None:
        self._goals: dict[int, Goal] = {g.id: g for g in goals}

    def add(self, goal: Goal) -> None:
        self._goals[goal.id] = goal

    def find_all(self) -> list[Goal]:
        return list(self._goals.values())
