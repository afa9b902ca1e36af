"""BaseService — shared foundation for budgetgraph services.

Every service receives the resolved :class:`BudgetGraphConfig` at
construction time (defaults when None). Services never read TOML or
env vars themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from budgetgraph.config.models import BudgetGraphConfig
from budgetgraph.services.result import ServiceResult

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GoalDependencyService(BaseService):
            def analyze(self, dependencies) -> ServiceResult:
                ...
    """

    def __init__(self, config: BudgetGraphConfig | None = None) -> None:
        self._config = config or BudgetGraphConfig()

    @property
    def config(self) -> BudgetGraphConfig:
        return self._config

    @staticmethod
    def _reject_negative(op: str, **ids: int | Iterable[int]) -> ServiceResult | None:
        """Return an INVALID_INPUT result if any identifier is negative.

        Each keyword carries one id or a collection of ids; for a
        collection the detail lists only its negative members, sorted.
        The graph engine accepts any integer; identifier hygiene is the
        caller's job, and services are the callers.
        """
        bad: dict[str, int | list[int]] = {}
        for name, value in ids.items():
            if isinstance(value, int):
                if value < 0:
                    bad[name] = value
                continue
            negative = sorted(v for v in value if v < 0)
            if negative:
                bad[name] = negative
        if not bad:
            return None
        names = ", ".join(sorted(bad))
        logger.debug("%s rejected negative identifiers: %s", op, bad)
        return ServiceResult.failure(
            op,
            "INVALID_INPUT",
            f"Identifiers must be non-negative: {names}",
            **bad,
        )
