"""Init command for creating myui.config.json."""

from pathlib import Path

import click

from ui_scaffold.context import ScaffoldContext
from ui_scaffold.error_boundary import cli_error_boundary
from ui_scaffold.io import config_path, create_default_config, save_project_config
from ui_scaffold.output import user_output


@click.command()
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing myui.config.json if present",
)
@click.option(
    "--cwd",
    "-c",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project directory (defaults to the current directory)",
)
@click.pass_obj
@cli_error_boundary
def init(ctx: ScaffoldContext, force: bool, cwd: Path | None) -> None:
    """Initialize myui.config.json configuration file.

    Writes the default config: components in components/ui, TypeScript
    sources, and the standard "@/..." import aliases. Edit the file afterwards
    to match your project's path aliases.
    """
    project_dir = (cwd if cwd is not None else ctx.cwd).resolve()
    path = config_path(project_dir)

    if path.exists() and not force:
        user_output(click.style("⚠️ Config file already exists.", fg="yellow"))
        user_output("Use --force to overwrite")
        return

    save_project_config(project_dir, create_default_config())
    user_output(click.style(f"✅ Config created at {path.name}", fg="green"))
    user_output("\nYou can now add components using:")
    user_output("  ui-scaffold add <component>")
