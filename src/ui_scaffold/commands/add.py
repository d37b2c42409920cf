"""Add command for installing registry components into a project."""

from pathlib import Path

import click

from ui_scaffold.context import ScaffoldContext
from ui_scaffold.error_boundary import cli_error_boundary
from ui_scaffold.exceptions import UnknownComponent
from ui_scaffold.io import load_project_config
from ui_scaffold.operations.install import InstallRequest, run_install
from ui_scaffold.output import user_output
from ui_scaffold.rendering import format_install_summary


@click.command()
@click.argument("components", nargs=-1)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.option("--overwrite", "-o", is_flag=True, help="Overwrite existing files")
@click.option(
    "--cwd",
    "-c",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="The working directory (defaults to the current directory)",
)
@click.option("--all", "-a", "all_components", is_flag=True, help="Add all available components")
@click.option(
    "--path",
    "-p",
    "target_path",
    type=click.Path(path_type=Path),
    default=None,
    help="The path to add the component to",
)
@click.pass_obj
@cli_error_boundary
def add(
    ctx: ScaffoldContext,
    components: tuple[str, ...],
    yes: bool,
    overwrite: bool,
    cwd: Path | None,
    all_components: bool,
    target_path: Path | None,
) -> None:
    """Add components to your project.

    Registry dependencies of the requested components are added too, and
    their npm packages are installed with the project's package manager.

    Examples:

        # Add a component and everything it depends on
        ui-scaffold add card

        # Add every component without prompting
        ui-scaffold add --all --yes
    """
    project_dir = (cwd if cwd is not None else ctx.cwd).resolve()

    config = load_project_config(project_dir)
    if config is None:
        user_output(click.style("\nProject not initialized.", fg="red"))
        user_output(click.style("Run: ", fg="yellow") + click.style("ui-scaffold init", bold=True))
        raise SystemExit(1)

    request = InstallRequest(
        components=components,
        all_components=all_components,
        skip_confirmation=yes,
        overwrite=overwrite,
        target_path=target_path,
    )

    try:
        report = run_install(ctx, project_dir, config, request)
    except UnknownComponent as e:
        user_output(click.style(f"\nInvalid component: {e.name}", fg="red"))
        if e.required_by is not None:
            user_output(click.style(f"  required by {e.required_by}", fg="red"))
        if e.available:
            user_output(click.style("\nAvailable components:", fg="yellow"))
            for name in e.available:
                user_output(click.style(f"  - {name}", fg="cyan"))
        raise SystemExit(1) from None

    if report.cancelled:
        return

    for line in format_install_summary(report):
        user_output(line)
    user_output(click.style("\n✨ Done!", bold=True))

    if report.has_component_failures or report.interrupted:
        raise SystemExit(1)
