"""Subcommand modules for budgetgraph.

register_commands() defers imports so ``budgetgraph --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups on the root CLI group."""
    from budgetgraph.commands.categories import categories
    from budgetgraph.commands.goals import goals
    from budgetgraph.commands.graph import graph

    cli.add_command(categories)
    cli.add_command(goals)
    cli.add_command(graph)
