"""Output mode selection for ServiceResult.

Three modes: JSON (``--json``), bare node ids (``--quiet``), and Rich
text for humans (default). Renderers live in :mod:`.renderers`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from budgetgraph.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from budgetgraph.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format *result* for display according to *settings*.

    JSON always wins over quiet: machine output must stay parseable.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
