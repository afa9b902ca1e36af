"""budgetgraph entry point.

The root group resolves settings once (flags, BUDGETGRAPH_* env vars,
budgetgraph.toml) and hands an AppContext to the categories, goals and
graph command groups.
"""

from __future__ import annotations

import click

from budgetgraph import __version__
from budgetgraph.commands import register_commands
from budgetgraph.commands._context import AppContext
from budgetgraph.config.settings import BudgetGraphSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="budgetgraph")
@click.option(
    "--json", "json_output", is_flag=True, help="Print results as ServiceResult JSON."
)
@click.option(
    "-q", "--quiet", is_flag=True, help="Print bare node ids, components or amounts."
)
@click.option(
    "-v", "--verbose", is_flag=True, help="Debug logs plus per-phase timings (walk, kosaraju)."
)
@click.option("--log-json", is_flag=True, help="Emit log records on stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="budgetgraph.toml to use instead of the discovered one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """budgetgraph: walk category hierarchies, roll up spending and find
    circular goal dependencies.

    Graphs are given inline as U:V edges; see each group's --examples.
    """
    ctx.obj = AppContext(
        BudgetGraphSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
