"""CategoryHierarchyService — category rollups over an undirected graph.

Parent/child relations between categories are stored as undirected
edges, so a traversal from any category reaches its whole connected
hierarchy. The BFS result doubles as the inclusion filter when summing
a user's expenses.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Protocol

from budgetgraph.domain.graph import GraphStore
from budgetgraph.domain.traversal import bfs, traverse
from budgetgraph.domain.types import TraversalMode
from budgetgraph.services.base import BaseService
from budgetgraph.services.result import ServiceResult
from budgetgraph.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from budgetgraph.config.models import BudgetGraphConfig
    from budgetgraph.domain.models import Expense

logger = logging.getLogger(__name__)


class ExpenseSource(Protocol):
    """Read access to stored expenses."""

    def list_expenses_for_user(self, user_id: int) -> list[Expense]: ...


class CategoryHierarchyService(BaseService):
    """Builds the category graph and answers hierarchy questions."""

    def __init__(
        self,
        expenses: ExpenseSource,
        config: BudgetGraphConfig | None = None,
    ) -> None:
        super().__init__(config)
        self._expenses = expenses
        self._graph = GraphStore(directed=False)

    @property
    def graph(self) -> GraphStore:
        return self._graph

    def add_relation(self, parent_id: int, child_id: int) -> ServiceResult:
        """Link *child_id* under *parent_id*."""
        rejected = self._reject_negative("add_relation", parent_id=parent_id, child_id=child_id)
        if rejected:
            return rejected

        self._graph.add_edge(parent_id, child_id)
        return ServiceResult(
            ok=True,
            op="add_relation",
            data={
                "parent_id": parent_id,
                "child_id": child_id,
                "edge_count": self._graph.edge_count,
            },
        )

    @traced
    def traverse(self, root_id: int, *, mode: TraversalMode | None = None) -> ServiceResult:
        """Categories connected to *root_id*, in BFS or DFS order."""
        rejected = self._reject_negative("traverse_categories", root_id=root_id)
        if rejected:
            return rejected

        mode = TraversalMode(mode or self._config.traversal.default_mode)
        order = traverse(self._graph, root_id, mode)
        return ServiceResult(
            ok=True,
            op="traverse_categories",
            data={
                "root_id": root_id,
                "mode": mode.value,
                "count": len(order),
                "items": order,
            },
        )

    @traced
    def hierarchy_spending(self, user_id: int, root_id: int) -> ServiceResult:
        """Per-category spending of *user_id* across *root_id*'s hierarchy.

        Only categories with at least one matching expense appear in
        ``spending``. Amounts are decimal strings so JSON output keeps
        exact values.
        """
        rejected = self._reject_negative("hierarchy_spending", user_id=user_id, root_id=root_id)
        if rejected:
            return rejected

        with trace_span("traverse") as span:
            categories = bfs(self._graph, root_id)
            if span:
                span.annotate("categories", len(categories))

        included = set(categories)
        totals: dict[int, Decimal] = {}
        with trace_span("aggregate") as span:
            expenses = self._expenses.list_expenses_for_user(user_id)
            for expense in expenses:
                if expense.category_id in included:
                    totals[expense.category_id] = (
                        totals.get(expense.category_id, Decimal("0")) + expense.amount
                    )
            if span:
                span.annotate("expenses", len(expenses))

        places = self._config.spending.decimal_places
        quantum = Decimal(1).scaleb(-places)
        total = sum(totals.values(), Decimal("0"))
        try:
            spending = {
                str(cat): str(amount.quantize(quantum)) for cat, amount in sorted(totals.items())
            }
            total_text = str(total.quantize(quantum))
        except InvalidOperation:
            # coefficient would exceed the context precision
            return ServiceResult.failure(
                "hierarchy_spending",
                "INVALID_INPUT",
                f"Amounts too large to show with {places} decimal places",
                root_id=root_id,
                user_id=user_id,
            )

        logger.debug(
            "spending for user %s under %s: %d categories, total %s",
            user_id,
            root_id,
            len(totals),
            total,
        )
        return ServiceResult(
            ok=True,
            op="hierarchy_spending",
            data={
                "root_id": root_id,
                "user_id": user_id,
                "categories": categories,
                "spending": spending,
                "total": total_text,
            },
        )
