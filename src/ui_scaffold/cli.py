import logging
import os

import click

from ui_scaffold.commands.add import add
from ui_scaffold.commands.init import init
from ui_scaffold.commands.list_cmd import list_components
from ui_scaffold.constants import DEBUG_ENV_VAR
from ui_scaffold.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="ui-scaffold")
@click.option("--debug", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Add UI components from the registry to your project."""
    debug = debug or bool(os.environ.get(DEBUG_ENV_VAR))
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)


cli.add_command(init)
cli.add_command(add)
cli.add_command(list_components)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
