"""Real package installer using subprocess."""

import logging
from collections.abc import Sequence
from pathlib import Path

from ui_scaffold.exceptions import PackageManagerFailure
from ui_scaffold.package_manager.abc import PackageInstaller
from ui_scaffold.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealPackageInstaller(PackageInstaller):
    """Production implementation that spawns the package manager."""

    def run(self, command: Sequence[str], packages: Sequence[str], cwd: Path) -> None:
        logger.debug("Running %s in %s", " ".join(command), cwd)
        try:
            run_subprocess_with_context(
                command,
                operation_context=f"install {', '.join(packages)} with {command[0]}",
                cwd=cwd,
            )
        except RuntimeError as e:
            raise PackageManagerFailure(command, packages, str(e)) from e
