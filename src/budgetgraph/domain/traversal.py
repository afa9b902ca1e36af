"""Breadth-first and depth-first traversal from a single root.

Both walks return the nodes reachable from ``start`` exactly once, in
discovery order. Ties between neighbors are broken by the order
``graph.neighbors()`` returns them, i.e. edge insertion order for a
:class:`~budgetgraph.domain.graph.GraphStore`.

The start node is always part of the result, even when the graph has
never seen it. Unreachable nodes are simply absent.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from typing import TYPE_CHECKING

from budgetgraph.domain.types import TraversalMode

if TYPE_CHECKING:
    from budgetgraph.domain.graph import NeighborSource, NodeId

logger = logging.getLogger(__name__)


def bfs(graph: NeighborSource, start: NodeId) -> list[NodeId]:
    """Level-order walk from *start* using a FIFO frontier."""
    order: list[NodeId] = []
    visited: set[NodeId] = {start}
    queue: deque[NodeId] = deque([start])

    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in graph.neighbors(node):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    logger.debug("bfs from %s visited %d nodes", start, len(order))
    return order


def dfs(graph: NeighborSource, start: NodeId) -> list[NodeId]:
    """Pre-order depth-first walk from *start*.

    Each stack frame keeps the node's neighbor iterator, so resuming a
    frame continues exactly where the recursive version would return to.
    Depth is bounded by memory, not by the interpreter's recursion limit.
    """
    order: list[NodeId] = [start]
    visited: set[NodeId] = {start}
    stack: list[Iterator[NodeId]] = [iter(graph.neighbors(start))]

    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(graph.neighbors(neighbor)))
                break
        else:
            stack.pop()

    logger.debug("dfs from %s visited %d nodes", start, len(order))
    return order


def traverse(
    graph: NeighborSource,
    start: NodeId,
    mode: TraversalMode = TraversalMode.BFS,
) -> list[NodeId]:
    """Walk *graph* from *start* in the requested order.

    *mode* may also be the plain string value (``"bfs"`` / ``"dfs"``).
    """
    if TraversalMode(mode) is TraversalMode.DFS:
        return dfs(graph, start)
    return bfs(graph, start)


def reachable(graph: NeighborSource, start: NodeId) -> set[NodeId]:
    """Every node reachable from *start*, including *start* itself."""
    return set(bfs(graph, start))
