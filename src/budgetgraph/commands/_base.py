"""Click base classes adding an ``--examples`` flag.

Commands built with ``examples=...`` get an eager ``--examples`` option
that prints the sample invocations and exits, plus a help epilog
pointing at it. Subcommands of a :class:`BudgetGroup` are
:class:`BudgetCommand` by default.
"""

from __future__ import annotations

from typing import Any

import click

_EPILOG = "Run with --examples for sample invocations."


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


class _ExamplesMixin:
    examples: str | None

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        if examples:
            kwargs.setdefault("epilog", _EPILOG)
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(  # type: ignore[attr-defined]
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples.",
                )
            )


class BudgetCommand(_ExamplesMixin, click.Command):
    """Command accepting ``examples=``."""


class BudgetGroup(_ExamplesMixin, click.Group):
    """Group accepting ``examples=``; subcommands default to BudgetCommand."""

    command_class = BudgetCommand
