"""Command group: raw graph traversal, components, and export."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from budgetgraph.commands._base import BudgetGroup
from budgetgraph.commands._params import EDGE, MODE_CHOICE
from budgetgraph.domain.graph import GraphStore
from budgetgraph.services.graph import GraphService

if TYPE_CHECKING:
    from budgetgraph.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  budgetgraph graph traverse 1 -e 1:2 -e 1:3 -e 2:4 -e 3:4 --directed
  budgetgraph graph components -e 1:2 -e 2:3 -e 3:1 -e 3:4
  budgetgraph graph components -e 1:2 --node 9
  budgetgraph --json graph export -e 1:2 -e 2:3 --directed"""


@click.group(cls=BudgetGroup, examples=_GRAPH_EXAMPLES)
@click.pass_obj
def graph(app: AppContext) -> None:
    """Run the graph engine on edges given on the command line."""


@graph.command(
    examples="""\
  budgetgraph graph traverse 1 -e 1:2 -e 3:4
  budgetgraph graph traverse 1 -e 1:2 -e 2:3 --directed --mode dfs"""
)
@click.argument("start", type=int)
@click.option("-e", "--edge", "edges", type=EDGE, multiple=True, help="U:V edge.")
@click.option("--directed", is_flag=True, help="Treat edges as one-way.")
@click.option("--mode", type=MODE_CHOICE, default=None, help="Traversal order (default: config).")
@click.pass_obj
def traverse(
    app: AppContext,
    start: int,
    edges: tuple[tuple[int, int], ...],
    directed: bool,
    mode: str | None,
) -> None:
    """List nodes reachable from START."""
    store = GraphStore.from_edges(edges, directed=directed)
    app.emit(GraphService(app.config).traverse(store, start, mode=mode))


@graph.command(
    examples="""\
  budgetgraph graph components -e 1:2 -e 2:1 -e 2:3
  budgetgraph --json graph components -e 1:1 --node 5"""
)
@click.option("-e", "--edge", "edges", type=EDGE, multiple=True, help="U:V directed edge.")
@click.option("--node", "nodes", type=int, multiple=True, help="Extra isolated vertex.")
@click.pass_obj
def components(
    app: AppContext,
    edges: tuple[tuple[int, int], ...],
    nodes: tuple[int, ...],
) -> None:
    """Strongly connected components of the directed edge set."""
    store = GraphStore.from_edges(edges, directed=True)
    app.emit(GraphService(app.config).components(store.adjacency(), nodes=nodes))


@graph.command(
    examples="""\
  budgetgraph --json graph export -e 1:2 -e 2:3
  budgetgraph --json graph export -e 1:2 --directed"""
)
@click.option("-e", "--edge", "edges", type=EDGE, multiple=True, help="U:V edge.")
@click.option("--directed", is_flag=True, help="Treat edges as one-way.")
@click.pass_obj
def export(app: AppContext, edges: tuple[tuple[int, int], ...], directed: bool) -> None:
    """Dump the graph as NetworkX node-link data."""
    store = GraphStore.from_edges(edges, directed=directed)
    app.emit(GraphService(app.config).export(store))
