"""Write a component's files into the consumer project.

Each file is fetched, rewritten to the project's aliases and written
atomically: content goes to a temporary sibling which then replaces the
target, so an interrupted or failed write never leaves a truncated file.
"""

import logging
import os
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path, PurePosixPath

from ui_scaffold.exceptions import FileWriteFailure, ImportRewriteError, UnsafePath
from ui_scaffold.models.config import ProjectConfig
from ui_scaffold.models.installation import FileOutcome
from ui_scaffold.models.registry import ComponentEntry
from ui_scaffold.operations.transform import transform_imports
from ui_scaffold.registry.abc import FetchFailed, RegistryClient

logger = logging.getLogger(__name__)

# Called with the existing target path; True means replace it
OverwriteDecision = Callable[[Path], bool]

_JS_EXTENSIONS = {".tsx": ".jsx", ".ts": ".js"}


def artifact_id_for(file_id: str, *, tsx: bool) -> str:
    """File id to request from the registry for the project's language mode.

    JavaScript projects get the .jsx/.js variant the registry serves next to
    each TypeScript source.
    """
    if tsx:
        return file_id
    path = PurePosixPath(file_id)
    js_suffix = _JS_EXTENSIONS.get(path.suffix)
    if js_suffix is None:
        return file_id
    return str(path.with_suffix(js_suffix))


def resolve_target_path(target_dir: Path, file_id: str) -> Path:
    """Path inside target_dir that file_id is written to.

    Files are flattened to their basename, as in the registry layout.

    Raises:
        UnsafePath: If file_id is absolute, contains "..", or the resulting
            path resolves outside target_dir (e.g. through a symlink)
    """
    pure = PurePosixPath(file_id)
    if (
        not file_id
        or "\\" in file_id
        or pure.is_absolute()
        or ".." in pure.parts
        or pure.name in ("", ".", "..")
    ):
        raise UnsafePath(file_id, target_dir)

    target = target_dir / pure.name
    if not target.resolve().is_relative_to(target_dir.resolve()):
        raise UnsafePath(file_id, target_dir)
    return target


def write_file_atomic(target: Path, content: str) -> None:
    """Write content to target in one replace operation.

    Raises:
        FileWriteFailure: If the directory or file cannot be written. The
            existing target, if any, is left unchanged.
    """
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    except OSError as e:
        raise FileWriteFailure(target, e.strerror or str(e)) from e

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        if target.exists():
            shutil.copymode(target, tmp_path)
        else:
            tmp_path.chmod(0o644)
        os.replace(tmp_path, target)
    except BaseException as e:
        tmp_path.unlink(missing_ok=True)
        if isinstance(e, OSError):
            raise FileWriteFailure(target, e.strerror or str(e)) from e
        raise


def rewrite_or_keep(source: str, config: ProjectConfig, file_id: str) -> str:
    """Rewrite imports, falling back to the untouched source on failure."""
    try:
        return transform_imports(source, config.aliases, file_id)
    except ImportRewriteError as e:
        logger.warning("%s; writing %s with its original imports", e, file_id)
        return source


def materialize(
    component: ComponentEntry,
    target_dir: Path,
    config: ProjectConfig,
    registry: RegistryClient,
    *,
    overwrite: bool,
    should_overwrite: OverwriteDecision,
) -> list[FileOutcome]:
    """Fetch, transform and write every file of one component.

    Args:
        component: Registry entry to install
        target_dir: Directory the files are written into
        config: Project config (aliases and language mode)
        registry: Registry client used to fetch sources
        overwrite: Replace existing files without asking
        should_overwrite: Consulted per existing file when overwrite is False

    Returns:
        One FileOutcome per file; declined conflicts are "skipped"

    Raises:
        RegistryUnavailable: If a source file cannot be fetched
        UnsafePath: If a file would land outside target_dir
        FileWriteFailure: If a file cannot be written, or two files of the
            component flatten to the same name. Both checked before any write.
    """
    planned = _plan_targets(component, target_dir, tsx=config.tsx)

    outcomes: list[FileOutcome] = []
    for artifact_id, target in planned:
        result = registry.fetch_artifact(artifact_id)
        if isinstance(result, FetchFailed):
            raise result.error

        content = rewrite_or_keep(result.value, config, artifact_id)

        if target.exists() and not overwrite and not should_overwrite(target):
            logger.info("Skipped existing %s", target)
            outcomes.append(FileOutcome(target=target, status="skipped"))
            continue

        write_file_atomic(target, content)
        logger.debug("Wrote %s (%d bytes)", target, len(content))
        outcomes.append(FileOutcome(target=target, status="written"))

    return outcomes


def _plan_targets(
    component: ComponentEntry, target_dir: Path, *, tsx: bool
) -> list[tuple[str, Path]]:
    """(artifact id, target path) per file, validated as a whole."""
    planned: list[tuple[str, Path]] = []
    claimed: dict[str, str] = {}
    for file_id in component.files:
        artifact_id = artifact_id_for(file_id, tsx=tsx)
        target = resolve_target_path(target_dir, artifact_id)
        previous = claimed.get(target.name)
        if previous == artifact_id:
            continue
        if previous is not None:
            raise FileWriteFailure(
                target, f"'{previous}' and '{artifact_id}' both flatten to {target.name}"
            )
        claimed[target.name] = artifact_id
        planned.append((artifact_id, target))
    return planned
