"""Click parameter types for graph input on the command line.

Edges are written ``U:V`` (``1:2`` is an edge from 1 to 2). Amounts
are written ``CATEGORY:AMOUNT`` (``4:12.50``).
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

import click


class EdgeParamType(click.ParamType):
    """``U:V`` pair of integer node ids."""

    name = "edge"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> tuple[int, int]:
        if isinstance(value, tuple):
            return value
        head, sep, tail = str(value).partition(":")
        if not sep:
            self.fail(f"{value!r} is not of the form U:V", param, ctx)
        try:
            return int(head), int(tail)
        except ValueError:
            self.fail(f"{value!r} must name two integer node ids", param, ctx)


class AmountParamType(click.ParamType):
    """``CATEGORY:AMOUNT`` pair of integer category id and decimal amount."""

    name = "amount"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> tuple[int, Decimal]:
        if isinstance(value, tuple):
            return value
        head, sep, tail = str(value).partition(":")
        if not sep:
            self.fail(f"{value!r} is not of the form CATEGORY:AMOUNT", param, ctx)
        try:
            amount = Decimal(tail)
            category = int(head)
        except (ValueError, InvalidOperation):
            self.fail(f"{value!r} needs an integer category and a decimal amount", param, ctx)
        if not amount.is_finite():
            self.fail(f"{value!r} has a non-finite amount", param, ctx)
        return category, amount


EDGE = EdgeParamType()
AMOUNT = AmountParamType()

MODE_CHOICE = click.Choice(["bfs", "dfs"], case_sensitive=False)
