"""Command group: goal dependency analysis."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import click

from budgetgraph.commands._base import BudgetGroup
from budgetgraph.commands._params import EDGE
from budgetgraph.domain.models import Goal
from budgetgraph.infrastructure.memory import InMemoryGoalSource
from budgetgraph.services.goals import GoalDependencyService

if TYPE_CHECKING:
    from budgetgraph.commands._context import AppContext

_GOALS_EXAMPLES = """\
  budgetgraph goals cycles -d 1:2 -d 2:3 -d 3:1
  budgetgraph goals cycles -d 1:2 --goal 1 --goal 2 --goal 3
  budgetgraph --json goals cycles -d 4:4"""


@click.group(cls=BudgetGroup, examples=_GOALS_EXAMPLES)
@click.pass_obj
def goals(app: AppContext) -> None:
    """Analyze dependencies between savings goals."""


@goals.command(
    examples="""\
  budgetgraph goals cycles -d 1:2 -d 2:1
  budgetgraph goals cycles -d 1:2 -d 2:3 --goal 4"""
)
@click.option(
    "-d",
    "--depends",
    "dependencies",
    type=EDGE,
    multiple=True,
    help="GOAL:PREREQUISITE, goal depends on prerequisite.",
)
@click.option(
    "--goal",
    "goal_ids",
    type=int,
    multiple=True,
    help="Known goal id; registered even without dependencies.",
)
@click.pass_obj
def cycles(
    app: AppContext,
    dependencies: tuple[tuple[int, int], ...],
    goal_ids: tuple[int, ...],
) -> None:
    """Find circular dependency groups among goals."""
    adjacency: dict[int, list[int]] = {}
    for goal, prerequisite in dependencies:
        adjacency.setdefault(goal, []).append(prerequisite)

    source = None
    if goal_ids:
        source = InMemoryGoalSource(
            Goal(id=gid, user_id=0, name=f"goal-{gid}", target_amount=Decimal("0"))
            for gid in goal_ids
        )
    app.emit(GoalDependencyService(source, app.config).analyze(adjacency))
