"""GraphService — direct access to the engine for diagnostics.

Wraps traversal, component analysis and NetworkX export in
ServiceResult so the CLI can render them. Domain-specific callers
(categories, goals) have their own services.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from budgetgraph.domain.components import cyclic_components, find_sccs, node_universe
from budgetgraph.domain.traversal import traverse
from budgetgraph.domain.types import TraversalMode
from budgetgraph.infrastructure.graph.engine import node_link
from budgetgraph.services.base import BaseService
from budgetgraph.services.result import ServiceResult
from budgetgraph.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from budgetgraph.domain.graph import Adjacency, GraphStore, NodeId


class GraphService(BaseService):
    """Traversal, SCC analysis and export over caller-built graphs."""

    @traced
    def traverse(
        self,
        store: GraphStore,
        start: NodeId,
        *,
        mode: TraversalMode | None = None,
    ) -> ServiceResult:
        """Walk *store* from *start*; mode defaults to ``[traversal]``."""
        mode = TraversalMode(mode or self._config.traversal.default_mode)
        with trace_span("walk") as span:
            order = traverse(store, start, mode)
            if span:
                span.annotate("visited", len(order))

        return ServiceResult(
            ok=True,
            op="traverse",
            data={
                "start": start,
                "mode": mode.value,
                "directed": store.directed,
                "count": len(order),
                "items": order,
            },
        )

    @traced
    def components(
        self,
        adjacency: Adjacency,
        *,
        nodes: Iterable[NodeId] | None = None,
    ) -> ServiceResult:
        """Strongly connected components of a directed adjacency mapping."""
        extra = list(nodes) if nodes is not None else None
        with trace_span("kosaraju") as span:
            sccs = find_sccs(adjacency, extra)
            if span:
                span.annotate("components", len(sccs))

        cycles = cyclic_components(
            adjacency,
            sccs,
            include_self_loops=self._config.goals.report_self_loops,
        )
        return ServiceResult(
            ok=True,
            op="components",
            data={
                "vertices": len(node_universe(adjacency, extra)),
                "count": len(sccs),
                "components": [sorted(c) for c in sccs],
                "cycles": [sorted(c) for c in cycles],
            },
        )

    @traced
    def export(self, store: GraphStore) -> ServiceResult:
        """NetworkX node-link data for *store*."""
        return ServiceResult(
            ok=True,
            op="export",
            data={
                "directed": store.directed,
                "node_count": len(store),
                "edge_count": store.edge_count,
                "graph": node_link(store),
            },
        )
