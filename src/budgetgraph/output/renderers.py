"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO. Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from budgetgraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from budgetgraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: node ids, one line per group."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if "items" in data:
        return "\n".join(str(node) for node in data["items"])
    if "components" in data:
        return "\n".join(" ".join(str(n) for n in comp) for comp in data["components"])
    if "spending" in data:
        return "\n".join(f"{cat} {amount}" for cat, amount in data["spending"].items())
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="bg.ok"), Text(f"  {result.op}", style="bg.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="bg.key")
    if key.endswith("_id") or key == "start":
        v = Text(str(value), style="bg.node")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _chain(nodes: list[Any]) -> str:
    return " → ".join(f"[bg.node]{n}[/bg.node]" for n in nodes)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="bg.error"),
        Text(f"  {result.op}", style="bg.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if verbose and err and err.detail:
        for key, value in err.detail.items():
            _field(console, key, value)


# ── Traversal ─────────────────────────────────────────────────────────


def _render_traversal(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a traversal as an ordered chain of node ids."""
    data = result.data
    root = data.get("root_id", data.get("start"))
    mode = str(data.get("mode", "")).upper()
    console.print(f"[bold]{mode}[/bold] from [bg.node]{root}[/bg.node]")
    console.print(_chain(data.get("items", [])))
    console.print(f"\n{data.get('count', 0)} nodes visited")


# ── Components ────────────────────────────────────────────────────────


def _render_components(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render SCCs, marking the ones that form a cycle."""
    components = result.data.get("components", [])
    cycles = {tuple(c) for c in result.data.get("cycles", [])}

    console.print(f"[bold]{len(components)} strongly connected components[/bold]")
    for index, component in enumerate(components, start=1):
        members = ", ".join(str(n) for n in component)
        marker = "  [bg.cycle]cycle[/bg.cycle]" if tuple(component) in cycles else ""
        console.print(f"  SCC {index}: {{{members}}}{marker}")

    if cycles:
        console.print(f"\n[bg.warning]{len(cycles)} circular group(s) found[/bg.warning]")
    elif components:
        console.print("\nNo cycles.")


# ── Spending ──────────────────────────────────────────────────────────


def _render_spending(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render per-category spending as a table."""
    data = result.data
    console.print(
        f"Spending for user [bg.node]{data.get('user_id')}[/bg.node] "
        f"under category [bg.node]{data.get('root_id')}[/bg.node]"
    )

    spending: dict[str, str] = data.get("spending", {})
    if not spending:
        console.print("No expenses in this hierarchy.")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Category", style="bg.node", no_wrap=True)
    table.add_column("Amount", style="bg.amount", justify="right")
    for category, amount in spending.items():
        table.add_row(category, amount)
    table.add_section()
    table.add_row("Total", str(data.get("total", "")))
    console.print(table)

    if verbose:
        console.print(f"\nCategories traversed: {_chain(data.get('categories', []))}")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "traverse": _render_traversal,
    "traverse_categories": _render_traversal,
    "components": _render_components,
    "goal_dependencies": _render_components,
    "hierarchy_spending": _render_spending,
}
