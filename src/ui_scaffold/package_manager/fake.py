"""Fake package installer for testing.

FakePackageInstaller records the commands it was asked to run without
spawning anything.
"""

from collections.abc import Iterable, Sequence
from pathlib import Path

from ui_scaffold.exceptions import PackageManagerFailure
from ui_scaffold.package_manager.abc import PackageInstaller


class FakePackageInstaller(PackageInstaller):
    """In-memory fake implementation of package installs.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, *, failing_packages: Iterable[str] = ()) -> None:
        """Create FakePackageInstaller.

        Args:
            failing_packages: Any command that includes one of these packages
                raises PackageManagerFailure (the call is still recorded)
        """
        self._failing_packages = frozenset(failing_packages)
        self._calls: list[tuple[list[str], Path]] = []

    @property
    def calls(self) -> list[tuple[list[str], Path]]:
        """(command, cwd) of every run() call. For test assertions only."""
        return self._calls

    @property
    def commands(self) -> list[list[str]]:
        return [command for command, _ in self._calls]

    def run(self, command: Sequence[str], packages: Sequence[str], cwd: Path) -> None:
        self._calls.append((list(command), cwd))
        failing = [p for p in packages if p in self._failing_packages]
        if failing:
            raise PackageManagerFailure(command, packages, f"fake failure for {', '.join(failing)}")
