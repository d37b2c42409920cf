"""Package installer interface.

The core builds the argument list (see commands.build_install_command); the
installer only runs it in the project directory.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path


class PackageInstaller(ABC):
    """Abstract interface for running package manager install commands."""

    @abstractmethod
    def run(self, command: Sequence[str], packages: Sequence[str], cwd: Path) -> None:
        """Run an install command to completion.

        Args:
            command: Full argument list, manager binary first
            packages: Packages being installed (for error reporting)
            cwd: Project directory to run in

        Raises:
            PackageManagerFailure: If the command fails or cannot be started
        """
        ...
