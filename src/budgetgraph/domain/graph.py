"""GraphStore — adjacency-list multigraph over integer node ids.

Holds data only: edge insertion and neighbor lookup. Traversal and
component analysis live in sibling modules and accept any object that
satisfies :class:`NeighborSource` (or a plain adjacency mapping).

Readers never see the internal lists. ``neighbors()`` and ``adjacency()``
return copies, so a snapshot handed to another consumer stays stable
while the owner keeps inserting edges.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Protocol

type NodeId = int
type Adjacency = Mapping[NodeId, Sequence[NodeId]]


class NeighborSource(Protocol):
    """Anything traversal can walk: ordered neighbors per node."""

    def neighbors(self, node: NodeId) -> Sequence[NodeId]: ...


class GraphStore:
    """Directed or undirected graph stored as ordered neighbor lists.

    Parallel edges and self-loops are kept as inserted. An undirected
    edge occupies two slots, one in each endpoint's list.
    """

    def __init__(self, directed: bool = False) -> None:
        self._directed = directed
        self._adjacency: dict[NodeId, list[NodeId]] = {}
        self._edge_count = 0

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[NodeId, NodeId]],
        *,
        directed: bool = False,
    ) -> GraphStore:
        """Build a graph by inserting *edges* in order."""
        store = cls(directed=directed)
        for u, v in edges:
            store.add_edge(u, v)
        return store

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def edge_count(self) -> int:
        """Number of ``add_edge`` calls made so far."""
        return self._edge_count

    def add_edge(self, u: NodeId, v: NodeId) -> None:
        """Append *v* to *u*'s neighbors (and *u* to *v*'s when undirected)."""
        self._adjacency.setdefault(u, []).append(v)
        if not self._directed:
            self._adjacency.setdefault(v, []).append(u)
        self._edge_count += 1

    def neighbors(self, node: NodeId) -> tuple[NodeId, ...]:
        """Neighbors of *node* in insertion order; empty for unknown nodes."""
        return tuple(self._adjacency.get(node, ()))

    def adjacency(self) -> Mapping[NodeId, tuple[NodeId, ...]]:
        """Read-only snapshot of the full adjacency structure."""
        return MappingProxyType({node: tuple(nbrs) for node, nbrs in self._adjacency.items()})

    def nodes(self) -> list[NodeId]:
        """Nodes with an adjacency entry, in first-insertion order.

        In a directed graph a pure sink never gets an entry of its own;
        use :func:`budgetgraph.domain.components.node_universe` for the
        full vertex set.
        """
        return list(self._adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"GraphStore({kind}, nodes={len(self)}, edges={self._edge_count})"
