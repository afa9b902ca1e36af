"""GoalDependencyService — surface circular dependencies between goals.

Callers describe "goal A depends on goal B" as ``{A: [B, ...]}``. Every
goal the source knows is registered as a vertex before analysis, so a
goal with no dependencies still shows up as its own component.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Protocol

from budgetgraph.domain.components import cyclic_components, find_sccs
from budgetgraph.services.base import BaseService
from budgetgraph.services.result import ServiceResult
from budgetgraph.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from budgetgraph.config.models import BudgetGraphConfig
    from budgetgraph.domain.models import Goal

logger = logging.getLogger(__name__)


class GoalSource(Protocol):
    """Read access to stored goals."""

    def find_all(self) -> list[Goal]: ...


class GoalDependencyService(BaseService):
    """Runs SCC analysis over goal dependency maps."""

    def __init__(
        self,
        goals: GoalSource | None = None,
        config: BudgetGraphConfig | None = None,
    ) -> None:
        super().__init__(config)
        self._goals = goals

    @traced
    def analyze(self, dependencies: Mapping[int, Sequence[int]]) -> ServiceResult:
        """Group goals into strongly connected components.

        ``cycles`` lists only the components that form a dependency loop.
        When a goal source is configured, dependencies naming goals it
        does not know are still analyzed but produce a warning.
        """
        mentioned = set(dependencies)
        for targets in dependencies.values():
            mentioned.update(targets)
        rejected = self._reject_negative("goal_dependencies", goal_ids=mentioned)
        if rejected:
            return rejected

        known: list[int] = []
        warnings: list[str] = []
        if self._goals is not None:
            known = [g.id for g in self._goals.find_all()]
            unknown = sorted(mentioned.difference(known))
            warnings.extend(f"Unknown goal id {gid} in dependencies" for gid in unknown)

        with trace_span("kosaraju") as span:
            sccs = find_sccs(dependencies, known)
            if span:
                span.annotate("components", len(sccs))

        cycles = cyclic_components(
            dependencies,
            sccs,
            include_self_loops=self._config.goals.report_self_loops,
        )
        if cycles:
            logger.debug("found %d circular goal groups", len(cycles))

        return ServiceResult(
            ok=True,
            op="goal_dependencies",
            data={
                "count": len(sccs),
                "components": [sorted(c) for c in sccs],
                "cycles": [sorted(c) for c in cycles],
                "has_cycles": bool(cycles),
            },
            warnings=warnings,
        )
