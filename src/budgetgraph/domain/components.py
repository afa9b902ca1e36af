"""Strongly connected components via Kosaraju's two-pass algorithm.

Works on a plain adjacency mapping so callers can analyze ad-hoc
dependency maps without building a :class:`GraphStore` first.

Pass 1 records every vertex in depth-first finishing order. Pass 2 walks
the edge-reversed graph, seeding each walk from the latest-finished
vertex not yet assigned; every walk collects exactly one component.
Both passes run on explicit stacks, so long dependency chains cannot
exhaust the interpreter's recursion limit.

Vertex universe: mapping keys, then every edge endpoint, then any extra
``nodes`` the caller registers. Endpoints are always reachable from the
key that lists them, so without ``nodes`` the output matches a walk
rooted at the keys alone. ``nodes`` is how a caller makes an isolated
vertex that appears in no mapping entry show up as its own component.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from budgetgraph.domain.graph import Adjacency, NodeId

logger = logging.getLogger(__name__)

_EMPTY: Sequence[int] = ()


def node_universe(adjacency: Adjacency, nodes: Iterable[NodeId] | None = None) -> list[NodeId]:
    """Ordered, de-duplicated vertex set: keys, endpoints, then *nodes*."""
    seen: dict[NodeId, None] = dict.fromkeys(adjacency)
    for targets in adjacency.values():
        seen.update(dict.fromkeys(targets))
    if nodes is not None:
        seen.update(dict.fromkeys(nodes))
    return list(seen)


def reverse_adjacency(adjacency: Adjacency) -> dict[NodeId, list[NodeId]]:
    """Edge-reversed copy: every ``u -> v`` becomes ``v -> u``."""
    reversed_graph: dict[NodeId, list[NodeId]] = {}
    for u, targets in adjacency.items():
        for v in targets:
            reversed_graph.setdefault(v, []).append(u)
    return reversed_graph


def finishing_order(adjacency: Adjacency, roots: Iterable[NodeId]) -> list[NodeId]:
    """Post-order of a depth-first forest grown from *roots* in turn.

    A vertex is appended only after every edge leaving it has been
    explored. Roots already reached by an earlier walk are skipped.
    """
    order: list[NodeId] = []
    visited: set[NodeId] = set()

    for root in roots:
        if root in visited:
            continue
        visited.add(root)
        stack: list[tuple[NodeId, Iterator[NodeId]]] = [
            (root, iter(adjacency.get(root, _EMPTY)))
        ]
        while stack:
            node, targets = stack[-1]
            for target in targets:
                if target not in visited:
                    visited.add(target)
                    stack.append((target, iter(adjacency.get(target, _EMPTY))))
                    break
            else:
                stack.pop()
                order.append(node)

    return order


def _collect(adjacency: Adjacency, seed: NodeId, visited: set[NodeId]) -> set[NodeId]:
    """Depth-first sweep from *seed*, claiming every unvisited vertex reached."""
    component: set[NodeId] = {seed}
    visited.add(seed)
    stack: list[NodeId] = [seed]
    while stack:
        node = stack.pop()
        for target in adjacency.get(node, _EMPTY):
            if target not in visited:
                visited.add(target)
                component.add(target)
                stack.append(target)
    return component


def find_sccs(adjacency: Adjacency, nodes: Iterable[NodeId] | None = None) -> list[set[NodeId]]:
    """Partition the directed graph into strongly connected components.

    Args:
        adjacency: ``node -> targets`` mapping. Missing keys mean no
            outgoing edges.
        nodes: Extra vertices to include even if no edge mentions them.

    Returns:
        Components in discovery order of the second pass (a topological
        order of the condensation, sources first). Empty for an empty
        vertex set.
    """
    universe = node_universe(adjacency, nodes)
    order = finishing_order(adjacency, universe)
    reversed_graph = reverse_adjacency(adjacency)

    visited: set[NodeId] = set()
    components: list[set[NodeId]] = []
    for node in reversed(order):
        if node not in visited:
            components.append(_collect(reversed_graph, node, visited))

    logger.debug("found %d components over %d vertices", len(components), len(universe))
    return components


def cyclic_components(
    adjacency: Adjacency,
    components: Sequence[set[NodeId]] | None = None,
    *,
    include_self_loops: bool = True,
) -> list[set[NodeId]]:
    """Components that contain a directed cycle.

    Any component with two or more vertices is cyclic. A singleton is
    cyclic only when its vertex lists itself as a target and
    *include_self_loops* is set.
    """
    if components is None:
        components = find_sccs(adjacency)

    cycles: list[set[NodeId]] = []
    for component in components:
        if len(component) > 1:
            cycles.append(component)
        elif include_self_loops:
            (node,) = component
            if node in adjacency.get(node, _EMPTY):
                cycles.append(component)
    return cycles
