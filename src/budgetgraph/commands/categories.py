"""Command group: category hierarchy traversal and spending rollups."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import click

from budgetgraph.commands._base import BudgetGroup
from budgetgraph.commands._params import AMOUNT, EDGE, MODE_CHOICE
from budgetgraph.domain.models import Expense
from budgetgraph.infrastructure.memory import InMemoryExpenseSource
from budgetgraph.services.categories import CategoryHierarchyService

if TYPE_CHECKING:
    from budgetgraph.commands._context import AppContext

_CATEGORIES_EXAMPLES = """\
  budgetgraph categories traverse 1 -r 1:2 -r 1:3 -r 2:4
  budgetgraph categories traverse 1 -r 1:2 -r 2:3 --mode dfs
  budgetgraph categories spending 1 -r 1:2 -r 2:3 -e 2:12.50 -e 3:4.25"""


def _build_service(
    app: AppContext,
    relations: tuple[tuple[int, int], ...],
    expenses: InMemoryExpenseSource | None = None,
) -> tuple[CategoryHierarchyService, list[str]]:
    """Service with *relations* loaded; rejected relations become warnings."""
    svc = CategoryHierarchyService(expenses or InMemoryExpenseSource(), app.config)
    warnings: list[str] = []
    for parent, child in relations:
        added = svc.add_relation(parent, child)
        if not added.ok and added.error:
            warnings.append(added.error.message)
    return svc, warnings


@click.group(cls=BudgetGroup, examples=_CATEGORIES_EXAMPLES)
@click.pass_obj
def categories(app: AppContext) -> None:
    """Walk the category hierarchy and roll up spending."""


@categories.command(
    examples="""\
  budgetgraph categories traverse 1 -r 1:2 -r 1:3
  budgetgraph --json categories traverse 5 -r 5:6 --mode dfs"""
)
@click.argument("root_id", type=int)
@click.option("-r", "--relation", "relations", type=EDGE, multiple=True, help="PARENT:CHILD link.")
@click.option("--mode", type=MODE_CHOICE, default=None, help="Traversal order (default: config).")
@click.pass_obj
def traverse(
    app: AppContext,
    root_id: int,
    relations: tuple[tuple[int, int], ...],
    mode: str | None,
) -> None:
    """List every category connected to ROOT_ID."""
    svc, warnings = _build_service(app, relations)
    result = svc.traverse(root_id, mode=mode)
    if warnings:
        result = result.model_copy(update={"warnings": [*warnings, *result.warnings]})
    app.emit(result)


@categories.command(
    examples="""\
  budgetgraph categories spending 1 -r 1:2 -e 2:10 -e 2:5.5
  budgetgraph --json categories spending 1 -r 1:2 -e 1:3 --user 7"""
)
@click.argument("root_id", type=int)
@click.option("-r", "--relation", "relations", type=EDGE, multiple=True, help="PARENT:CHILD link.")
@click.option(
    "-e", "--expense", "expenses", type=AMOUNT, multiple=True, help="CATEGORY:AMOUNT expense."
)
@click.option("--user", "user_id", type=int, default=1, show_default=True, help="Expense owner.")
@click.pass_obj
def spending(
    app: AppContext,
    root_id: int,
    relations: tuple[tuple[int, int], ...],
    expenses: tuple[tuple[int, Decimal], ...],
    user_id: int,
) -> None:
    """Sum expenses across ROOT_ID's category hierarchy."""
    source = InMemoryExpenseSource(
        Expense(id=i, user_id=user_id, category_id=category, amount=amount)
        for i, (category, amount) in enumerate(expenses, start=1)
    )
    svc, warnings = _build_service(app, relations, source)
    result = svc.hierarchy_spending(user_id, root_id)
    if warnings:
        result = result.model_copy(update={"warnings": [*warnings, *result.warnings]})
    app.emit(result)
