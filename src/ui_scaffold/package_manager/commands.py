"""Package manager detection and install command construction."""

import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Literal, cast

from ui_scaffold.exceptions import UnknownPackageManager

PackageManagerName = Literal["npm", "pnpm", "yarn", "bun"]

# (runtime args, dev args) per manager
_INSTALL_ARGS: dict[PackageManagerName, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "npm": (("install",), ("install", "--save-dev")),
    "pnpm": (("add",), ("add", "-D")),
    "yarn": (("add",), ("add", "--dev")),
    "bun": (("add",), ("add", "-d")),
}

SUPPORTED_PACKAGE_MANAGERS: tuple[PackageManagerName, ...] = tuple(_INSTALL_ARGS)

# Checked in order; the first lockfile present wins
_LOCKFILES: tuple[tuple[str, PackageManagerName], ...] = (
    ("bun.lockb", "bun"),
    ("bun.lock", "bun"),
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("package-lock.json", "npm"),
)


def validate_package_manager(value: str) -> PackageManagerName:
    """Validate and return package manager name.

    Raises:
        UnknownPackageManager: If value has no known install command mapping
    """
    if value not in _INSTALL_ARGS:
        raise UnknownPackageManager(value, SUPPORTED_PACKAGE_MANAGERS)
    return cast(PackageManagerName, value)


def detect_package_manager(
    project_dir: Path,
    *,
    override: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the package manager for project_dir.

    Order: explicit override, lockfile in project_dir, the
    npm_config_user_agent of the invoking manager, then npm. The result is not
    validated; an unsupported override is returned as-is so the caller can
    report it.
    """
    if override:
        return override

    for lockfile, manager in _LOCKFILES:
        if (project_dir / lockfile).exists():
            return manager

    env = environ if environ is not None else os.environ
    user_agent = env.get("npm_config_user_agent", "")
    agent_name = user_agent.split("/", 1)[0].strip()
    if agent_name in _INSTALL_ARGS:
        return agent_name

    return "npm"


def build_install_command(manager: str, packages: Sequence[str], *, dev: bool) -> list[str]:
    """Argument list that installs packages with manager.

    Example:
        >>> build_install_command("pnpm", ["clsx"], dev=True)
        ['pnpm', 'add', '-D', 'clsx']

    Raises:
        UnknownPackageManager: If manager is not supported
        ValueError: If packages is empty
    """
    name = validate_package_manager(manager)
    if not packages:
        msg = "No packages to install"
        raise ValueError(msg)
    runtime_args, dev_args = _INSTALL_ARGS[name]
    return [name, *(dev_args if dev else runtime_args), *packages]
