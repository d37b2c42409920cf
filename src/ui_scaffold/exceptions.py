"""Errors raised by registry resolution and component installation.

Pre-mutation errors (RegistryUnavailable, UnknownComponent, CyclicDependency,
UnknownPackageManager) abort a run before anything is written. The rest are
captured per component or per package batch and reported at the end.
"""

from collections.abc import Sequence
from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all ui-scaffold errors."""


class RegistryUnavailable(ScaffoldError):
    """Raised when both the primary and the fallback registry failed.

    invalid_content is set when every endpoint answered but none served
    usable content, i.e. the registry itself is broken rather than down.
    """

    def __init__(
        self, identifier: str, attempts: Sequence[str], *, invalid_content: bool = False
    ) -> None:
        self.identifier = identifier
        self.attempts = tuple(attempts)
        self.invalid_content = invalid_content
        detail = "; ".join(self.attempts) if self.attempts else "no endpoints tried"
        if invalid_content:
            message = f"Registry served an invalid {identifier} ({detail})"
        else:
            message = f"Failed to fetch {identifier} from the registry ({detail})"
        super().__init__(message)


class UnknownComponent(ScaffoldError):
    """Raised when a component name is not present in the registry index."""

    def __init__(
        self,
        name: str,
        available: Sequence[str] = (),
        required_by: str | None = None,
    ) -> None:
        self.name = name
        self.available = tuple(available)
        self.required_by = required_by
        if required_by is not None:
            message = f"Component '{name}' (required by '{required_by}') not found in registry"
        else:
            message = f"Component '{name}' not found in registry"
        super().__init__(message)


class CyclicDependency(ScaffoldError):
    """Raised when registryDependencies form a cycle."""

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__(f"Cyclic registry dependency: {' -> '.join(self.chain)}")


class UnsafePath(ScaffoldError):
    """Raised when an artifact would be written outside its target directory."""

    def __init__(self, file_id: str, target_dir: Path) -> None:
        self.file_id = file_id
        self.target_dir = target_dir
        super().__init__(f"Refusing to write '{file_id}' outside {target_dir}")


class FileWriteFailure(ScaffoldError):
    """Raised when a component file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")


class PackageManagerFailure(ScaffoldError):
    """Raised when a package manager command exits unsuccessfully."""

    def __init__(self, command: Sequence[str], packages: Sequence[str], detail: str) -> None:
        self.command = tuple(command)
        self.packages = tuple(packages)
        self.detail = detail
        super().__init__(f"Failed to install {', '.join(self.packages)}: {detail}")


class UnknownPackageManager(ScaffoldError):
    """Raised for a package manager without a known install command mapping."""

    def __init__(self, manager: str, supported: Sequence[str]) -> None:
        self.manager = manager
        self.supported = tuple(supported)
        super().__init__(
            f"Unknown package manager '{manager}'. Supported: {', '.join(self.supported)}"
        )


class ImportRewriteError(ScaffoldError):
    """Raised when import specifiers in a source file cannot be parsed."""

    def __init__(self, file_id: str, reason: str) -> None:
        self.file_id = file_id
        self.reason = reason
        super().__init__(f"Cannot rewrite imports in {file_id}: {reason}")


class ConfigError(ScaffoldError):
    """Raised when the project config file is malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config at {path}: {reason}")
