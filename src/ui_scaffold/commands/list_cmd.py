"""List command for showing registry components."""

import click
from rich.console import Console

from ui_scaffold.context import ScaffoldContext
from ui_scaffold.error_boundary import cli_error_boundary
from ui_scaffold.output import machine_output
from ui_scaffold.registry.abc import FetchFailed
from ui_scaffold.rendering import build_components_table


@click.command(name="list")
@click.pass_obj
@cli_error_boundary
def list_components(ctx: ScaffoldContext) -> None:
    """List components available in the registry."""
    result = ctx.registry.fetch_index()
    if isinstance(result, FetchFailed):
        raise result.error

    index = result.value
    if not index.ui_components():
        machine_output("No components available")
        return

    console = Console(width=200)
    console.print(build_components_table(index))
