"""Tests for subprocess helpers and the real package installer."""

import sys
from pathlib import Path

import pytest

from ui_scaffold.exceptions import PackageManagerFailure
from ui_scaffold.package_manager.real import RealPackageInstaller
from ui_scaffold.subprocess_utils import run_subprocess_with_context


def test_success_returns_completed_process(tmp_path: Path) -> None:
    result = run_subprocess_with_context(
        [sys.executable, "-c", "import os; print(os.getcwd())"],
        operation_context="print cwd",
        cwd=tmp_path,
    )

    assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()


def test_nonzero_exit_includes_context_and_output() -> None:
    script = "import sys; print('out'); sys.stderr.write('bad'); sys.exit(3)"

    with pytest.raises(RuntimeError) as exc_info:
        run_subprocess_with_context(
            [sys.executable, "-c", script],
            operation_context="run failing script",
        )

    message = str(exc_info.value)
    assert "Failed to run failing script" in message
    assert "Exit code: 3" in message
    assert "stdout: out" in message
    assert "stderr: bad" in message


def test_missing_binary() -> None:
    with pytest.raises(RuntimeError, match="Command not found"):
        run_subprocess_with_context(
            ["definitely-not-a-package-manager-xyz", "install"],
            operation_context="install clsx",
        )


def test_real_installer_wraps_failure(tmp_path: Path) -> None:
    command = [sys.executable, "-c", "import sys; sys.exit(3)"]

    with pytest.raises(PackageManagerFailure) as exc_info:
        RealPackageInstaller().run(command, ["clsx"], tmp_path)

    assert exc_info.value.packages == ("clsx",)
    assert "Exit code: 3" in exc_info.value.detail
    assert str(exc_info.value).startswith("Failed to install clsx: ")


def test_real_installer_success(tmp_path: Path) -> None:
    RealPackageInstaller().run([sys.executable, "-c", "pass"], ["clsx"], tmp_path)
