"""NetworkX bridge for diagnostics and export.

The engine's own algorithms never touch NetworkX. This module converts
a GraphStore (or a raw adjacency mapping) into a NetworkX multigraph so
diagnostic code can serialize it or cross-check results.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import networkx as nx

from budgetgraph.domain.components import node_universe

if TYPE_CHECKING:
    from budgetgraph.domain.graph import Adjacency, GraphStore, NodeId


def adjacency_to_networkx(
    adjacency: Adjacency,
    nodes: Iterable[NodeId] | None = None,
) -> nx.MultiDiGraph:
    """Directed multigraph with one edge per adjacency slot.

    Every vertex of the universe is added first, so isolated vertices
    stay visible to NetworkX algorithms.
    """
    g: nx.MultiDiGraph = nx.MultiDiGraph()
    g.add_nodes_from(node_universe(adjacency, nodes))
    for u, targets in adjacency.items():
        for v in targets:
            g.add_edge(u, v)
    return g


def store_to_networkx(store: GraphStore) -> nx.MultiGraph | nx.MultiDiGraph:
    """Convert a GraphStore, preserving direction and parallel edges.

    An undirected edge is stored twice in the adjacency lists (once per
    endpoint); only the first slot becomes a NetworkX edge.
    """
    if store.directed:
        return adjacency_to_networkx(store.adjacency())

    g: nx.MultiGraph = nx.MultiGraph()
    g.add_nodes_from(store.nodes())
    pending: dict[tuple[NodeId, NodeId], int] = {}
    for u, targets in store.adjacency().items():
        for v in targets:
            mirror = (v, u)
            if pending.get(mirror, 0) > 0:
                pending[mirror] -= 1
                continue
            g.add_edge(u, v)
            pending[(u, v)] = pending.get((u, v), 0) + 1
    return g


def node_link(store: GraphStore) -> dict[str, Any]:
    """NetworkX node-link JSON data for *store*."""
    return nx.node_link_data(store_to_networkx(store), edges="edges")
