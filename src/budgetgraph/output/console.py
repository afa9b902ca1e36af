"""Rich Console factory and theme for budgetgraph output.

Consoles render into a StringIO buffer so ``format_result() -> str``
stays a plain function. Outside a terminal (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BUDGET_THEME = Theme(
    {
        "bg.ok": "bold green",
        "bg.error": "bold red",
        "bg.warning": "bold yellow",
        "bg.op": "bold cyan",
        "bg.key": "dim",
        "bg.node": "bold blue",
        "bg.cycle": "bold magenta",
        "bg.amount": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=BUDGET_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Rendered text of a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
