"""Budget records that feed the graph callers.

Only the fields the category and goal services read are modeled here.
Storage of these records is owned by the application, not by this package.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal

from pydantic import BaseModel


class Category(BaseModel):
    """An expense category; hierarchy lives in the category graph."""

    model_config = {"frozen": True}

    id: int
    name: str
    description: str = ""


class Expense(BaseModel):
    """A single logged expense tagged with one category."""

    model_config = {"frozen": True}

    id: int
    user_id: int
    budget_id: int = 0
    category_id: int
    amount: Decimal
    date: Date | None = None
    description: str = ""


class Goal(BaseModel):
    """A savings goal. Dependencies between goals are supplied separately."""

    model_config = {"frozen": True}

    id: int
    user_id: int
    name: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0")
    deadline: Date | None = None

    @property
    def is_completed(self) -> bool:
        return self.current_amount >= self.target_amount
