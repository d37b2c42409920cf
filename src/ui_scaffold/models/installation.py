"""Resolution and installation result models."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal

FileStatus = Literal["written", "skipped"]


@dataclass(frozen=True)
class ResolutionResult:
    """Transitive closure of a set of requested components.

    components_to_install keeps first-discovery order (requested names first,
    then their dependencies breadth-first). The package sets are unordered;
    use sorted() when a stable order is needed.
    """

    components_to_install: tuple[str, ...]
    dependencies: frozenset[str]
    dev_dependencies: frozenset[str]
    tailwind_plugins: tuple[str, ...] = ()


@dataclass(frozen=True)
class FileOutcome:
    """What happened to one target file."""

    target: Path
    status: FileStatus


@dataclass(frozen=True)
class InstallOutcome:
    """Result of installing one component."""

    name: str
    success: bool
    error: str | None = None
    files: tuple[FileOutcome, ...] = ()

    @property
    def skipped_files(self) -> list[Path]:
        return [f.target for f in self.files if f.status == "skipped"]


class InstallStage(Enum):
    """Stages of one `add` run."""

    IDLE = "idle"
    FETCHING_REGISTRY = "fetching-registry"
    RESOLVING = "resolving"
    AWAITING_CONFIRMATION = "awaiting-confirmation"
    INSTALLING_PACKAGES = "installing-packages"
    INSTALLING_COMPONENTS = "installing-components"
    REPORTING = "reporting"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class InstallReport:
    """Summary of an `add` run, built in the reporting stage."""

    stage: InstallStage
    resolution: ResolutionResult | None = None
    outcomes: tuple[InstallOutcome, ...] = ()
    package_failures: tuple[str, ...] = ()
    cancelled: bool = False
    package_manager: str | None = None
    target_dir: Path | None = None
    interrupted: bool = False

    @property
    def succeeded(self) -> list[InstallOutcome]:
        return [o for o in self.outcomes if o.success]

    @property
    def failed(self) -> list[InstallOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def has_component_failures(self) -> bool:
        return any(not o.success for o in self.outcomes)

    @property
    def not_attempted(self) -> list[str]:
        """Resolved components left untouched because the run was interrupted."""
        if self.resolution is None:
            return []
        attempted = {o.name for o in self.outcomes}
        return [n for n in self.resolution.components_to_install if n not in attempted]
