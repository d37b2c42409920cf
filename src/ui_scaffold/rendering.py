"""Rendering of install reports and registry listings."""

import click
from rich.table import Table

from ui_scaffold.models.installation import InstallReport
from ui_scaffold.models.registry import RegistryIndex


def format_install_summary(report: InstallReport) -> list[str]:
    """Lines summarizing an install run.

    Successes and failures are always both listed when present; nothing is
    collapsed into a single count.
    """
    lines: list[str] = []

    if report.succeeded:
        lines.append("")
        lines.append(click.style("✓ Successfully installed:", fg="green"))
        for outcome in report.succeeded:
            skipped = outcome.skipped_files
            suffix = f" (skipped {', '.join(p.name for p in skipped)})" if skipped else ""
            lines.append(click.style(f"  - {outcome.name}{suffix}", fg="green"))

    if report.failed:
        lines.append("")
        lines.append(click.style("✗ Failed to install:", fg="red"))
        for outcome in report.failed:
            lines.append(click.style(f"  - {outcome.name}: {outcome.error}", fg="red"))

    if report.interrupted:
        lines.append("")
        lines.append(click.style("✗ Interrupted, not installed:", fg="red"))
        for name in report.not_attempted:
            lines.append(click.style(f"  - {name}", fg="red"))

    if report.package_failures:
        lines.append("")
        lines.append(click.style("✗ Package installation failed:", fg="red"))
        for failure in report.package_failures:
            first_line = failure.splitlines()[0] if failure else failure
            lines.append(click.style(f"  - {first_line}", fg="red"))
        if report.package_manager is not None:
            lines.append(f"  Re-run the install with {report.package_manager} manually.")

    if report.resolution is not None and report.resolution.tailwind_plugins:
        lines.append("")
        lines.append(click.style("Add these plugins to your tailwind config:", bold=True))
        for plugin in report.resolution.tailwind_plugins:
            lines.append(f"  - {plugin}")

    if report.target_dir is not None:
        lines.append("")
        lines.append(f"Location: {report.target_dir}")

    return lines


def build_components_table(index: RegistryIndex) -> Table:
    """Table of ui components offered by the registry."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("files")
    table.add_column("dependencies")
    table.add_column("requires")

    for entry in index.ui_components():
        table.add_row(
            entry.name,
            ", ".join(entry.files),
            ", ".join(sorted(entry.dependencies | entry.dev_dependencies)) or "-",
            ", ".join(entry.registry_dependencies) or "-",
        )
    return table
