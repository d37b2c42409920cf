"""Install orchestration for `add`.

A run moves through InstallStage in order:

    IDLE -> FETCHING_REGISTRY -> RESOLVING -> AWAITING_CONFIRMATION
         -> INSTALLING_PACKAGES -> INSTALLING_COMPONENTS -> REPORTING -> DONE

Errors while fetching the index or resolving move the run to FAILED and
propagate; nothing has been written at that point. After resolution, package
and component failures are collected into the InstallReport and the run
carries on. An interrupt (Ctrl-C, or an aborted prompt) stops the run at the
next component boundary; the report then lists what was installed so far.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import click

from ui_scaffold.context import ScaffoldContext
from ui_scaffold.exceptions import PackageManagerFailure, ScaffoldError
from ui_scaffold.models.config import ProjectConfig
from ui_scaffold.models.installation import (
    InstallOutcome,
    InstallReport,
    InstallStage,
    ResolutionResult,
)
from ui_scaffold.models.registry import ComponentEntry, RegistryIndex
from ui_scaffold.operations.materialize import materialize
from ui_scaffold.operations.resolve import resolve
from ui_scaffold.package_manager.commands import (
    build_install_command,
    detect_package_manager,
    validate_package_manager,
)
from ui_scaffold.registry.abc import FetchFailed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallRequest:
    """What the user asked `add` to do."""

    components: tuple[str, ...] = ()
    all_components: bool = False
    skip_confirmation: bool = False
    overwrite: bool = False
    target_path: Path | None = None


class InstallRun:
    """One install run over a project directory.

    Not reusable: create a new InstallRun per invocation.
    """

    def __init__(self, ctx: ScaffoldContext, project_dir: Path, config: ProjectConfig) -> None:
        self.ctx = ctx
        self.project_dir = project_dir
        self.config = config
        self.stage = InstallStage.IDLE

    def _enter(self, stage: InstallStage) -> None:
        logger.debug("Install stage: %s -> %s", self.stage.value, stage.value)
        self.stage = stage

    def execute(self, request: InstallRequest) -> InstallReport:
        """Run every stage and return the final report.

        Raises:
            RegistryUnavailable: If the registry index cannot be fetched
            UnknownComponent: If a requested or dependent component is missing
            CyclicDependency: If the requested components depend on each other in a loop
            UnknownPackageManager: If packages are needed and the project's
                package manager is not supported
        """
        feedback = self.ctx.feedback
        try:
            self._enter(InstallStage.FETCHING_REGISTRY)
            index = self._fetch_index()

            self._enter(InstallStage.RESOLVING)
            names = self._requested_names(index, request)
            if not names:
                feedback.warning("No components selected.")
                return self._finish(cancelled=True)
            resolution = resolve(names, index)
            manager = self._preflight_package_manager(resolution)
        except ScaffoldError:
            self._enter(InstallStage.FAILED)
            raise

        if not request.skip_confirmation:
            self._enter(InstallStage.AWAITING_CONFIRMATION)
            self._show_plan(resolution)
            if not self.ctx.prompter.confirm("Proceed with installation?", default=True):
                feedback.warning("Installation cancelled.")
                return self._finish(resolution=resolution, cancelled=True)

        self._enter(InstallStage.INSTALLING_PACKAGES)
        package_failures: list[str] = []
        if manager is not None:
            for packages, dev in (
                (sorted(resolution.dependencies), False),
                (sorted(resolution.dev_dependencies), True),
            ):
                failure = self._install_packages(manager, packages, dev=dev)
                if failure is not None:
                    package_failures.append(failure)

        self._enter(InstallStage.INSTALLING_COMPONENTS)
        target_dir = self._target_dir(request)
        outcomes: list[InstallOutcome] = []
        interrupted = False
        for name in resolution.components_to_install:
            try:
                outcome = self._install_component(
                    index.entries[name], target_dir, overwrite=request.overwrite
                )
            except (KeyboardInterrupt, click.Abort):
                # Files of earlier components are already in place; report them
                feedback.warning(f"Interrupted while installing {name}.")
                interrupted = True
                break
            outcomes.append(outcome)

        return self._finish(
            resolution=resolution,
            outcomes=tuple(outcomes),
            package_failures=tuple(package_failures),
            package_manager=manager,
            target_dir=target_dir,
            interrupted=interrupted,
        )

    def _fetch_index(self) -> RegistryIndex:
        self.ctx.feedback.info("Fetching component registry...")
        result = self.ctx.registry.fetch_index()
        if isinstance(result, FetchFailed):
            self.ctx.feedback.error("Failed to fetch component registry")
            raise result.error
        self.ctx.feedback.success("Fetched component registry")
        return result.value

    def _requested_names(self, index: RegistryIndex, request: InstallRequest) -> list[str]:
        if request.all_components:
            return [entry.name for entry in index.ui_components()]
        if request.components:
            return list(request.components)
        return self.ctx.prompter.select_components(index.ui_components())

    def _preflight_package_manager(self, resolution: ResolutionResult) -> str | None:
        """Validate the package manager before any side effect happens."""
        if not resolution.dependencies and not resolution.dev_dependencies:
            return None
        manager = detect_package_manager(self.project_dir, override=self.config.package_manager)
        return validate_package_manager(manager)

    def _show_plan(self, resolution: ResolutionResult) -> None:
        feedback = self.ctx.feedback
        feedback.info("\nComponents to install:")
        for name in resolution.components_to_install:
            feedback.info(f"  - {name}")
        if resolution.dependencies:
            feedback.info("\nPackages to install:")
            for dep in sorted(resolution.dependencies):
                feedback.info(f"  - {dep}")
        if resolution.dev_dependencies:
            feedback.info("\nDev packages to install:")
            for dep in sorted(resolution.dev_dependencies):
                feedback.info(f"  - {dep}")

    def _install_packages(self, manager: str, packages: list[str], *, dev: bool) -> str | None:
        """Install one batch. Returns the failure message instead of raising."""
        if not packages:
            return None
        label = "dev dependencies" if dev else "dependencies"
        command = build_install_command(manager, packages, dev=dev)
        self.ctx.feedback.info(f"Installing {label}...")
        try:
            self.ctx.package_installer.run(command, packages, self.project_dir)
        except PackageManagerFailure as e:
            logger.debug("Package install failed: %s", e.detail)
            self.ctx.feedback.error(f"Failed to install {label}: {', '.join(packages)}")
            return str(e)
        self.ctx.feedback.success(f"Installed {label}")
        return None

    def _target_dir(self, request: InstallRequest) -> Path:
        if request.target_path is not None:
            return (self.project_dir / request.target_path).resolve()
        return self.config.ui_dir(self.project_dir)

    def _install_component(
        self, entry: ComponentEntry, target_dir: Path, *, overwrite: bool
    ) -> InstallOutcome:
        feedback = self.ctx.feedback
        feedback.info(f"Installing {entry.name}...")
        try:
            files = materialize(
                entry,
                target_dir,
                self.config,
                self.ctx.registry,
                overwrite=overwrite,
                should_overwrite=self.ctx.prompter.confirm_overwrite,
            )
        except ScaffoldError as e:
            feedback.error(f"Failed to install {entry.name}")
            return InstallOutcome(name=entry.name, success=False, error=str(e))

        for f in files:
            if f.status == "skipped":
                feedback.warning(f"  Skipped {f.target.name}")
        feedback.success(f"Installed {entry.name}")
        return InstallOutcome(name=entry.name, success=True, files=tuple(files))

    def _finish(
        self,
        *,
        resolution: ResolutionResult | None = None,
        outcomes: tuple[InstallOutcome, ...] = (),
        package_failures: tuple[str, ...] = (),
        cancelled: bool = False,
        package_manager: str | None = None,
        target_dir: Path | None = None,
        interrupted: bool = False,
    ) -> InstallReport:
        self._enter(InstallStage.REPORTING)
        report = InstallReport(
            stage=InstallStage.DONE,
            resolution=resolution,
            outcomes=outcomes,
            package_failures=package_failures,
            cancelled=cancelled,
            package_manager=package_manager,
            target_dir=target_dir,
            interrupted=interrupted,
        )
        self._enter(InstallStage.DONE)
        return report


def run_install(
    ctx: ScaffoldContext,
    project_dir: Path,
    config: ProjectConfig,
    request: InstallRequest,
) -> InstallReport:
    """Fetch, resolve, confirm and install the requested components.

    See InstallRun.execute for the errors that abort a run.
    """
    return InstallRun(ctx, project_dir, config).execute(request)
