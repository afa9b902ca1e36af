"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Configures logging and telemetry, builds the
service config, and routes results to stdout/stderr with exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from budgetgraph.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from budgetgraph.config.models import BudgetGraphConfig
    from budgetgraph.config.settings import BudgetGraphSettings
    from budgetgraph.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: BudgetGraphSettings) -> None:
        self.settings = settings

        from budgetgraph.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            quiet=settings.quiet,
        )

        if settings.verbose:
            from budgetgraph.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def config(self) -> BudgetGraphConfig:
        """Section config handed to services."""
        return self.settings.as_config()

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr unless in JSON mode,
          where they are already part of the payload.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
