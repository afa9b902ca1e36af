"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, budgetgraph.toml only holds
overrides. An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from budgetgraph.domain.types import TraversalMode


class TraversalConfig(BaseModel):
    """[traversal] section."""

    model_config = {"frozen": True}

    default_mode: TraversalMode = TraversalMode.BFS


class GoalsConfig(BaseModel):
    """[goals] section."""

    model_config = {"frozen": True}

    # A goal that depends on itself is reported as a one-member cycle.
    report_self_loops: bool = True


class SpendingConfig(BaseModel):
    """[spending] section."""

    model_config = {"frozen": True}

    decimal_places: int = Field(default=2, ge=0, le=8)


class BudgetGraphConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    traversal: TraversalConfig = Field(default_factory=TraversalConfig)
    goals: GoalsConfig = Field(default_factory=GoalsConfig)
    spending: SpendingConfig = Field(default_factory=SpendingConfig)
