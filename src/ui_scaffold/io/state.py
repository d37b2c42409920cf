"""Project config I/O for myui.config.json."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ui_scaffold.constants import CONFIG_FILENAME
from ui_scaffold.exceptions import ConfigError
from ui_scaffold.models.config import ProjectConfig


def config_path(project_dir: Path) -> Path:
    return project_dir / CONFIG_FILENAME


def load_project_config(project_dir: Path) -> ProjectConfig | None:
    """Load myui.config.json from project directory.

    Returns None if file doesn't exist.

    Raises:
        ConfigError: If the file is not valid JSON or has an unrecognized shape
    """
    path = config_path(project_dir)
    if not path.exists():
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(path, f"not valid JSON ({e})") from e

    if not isinstance(data, dict):
        raise ConfigError(path, "expected a JSON object")

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        errors = "; ".join(_format_validation_error(err) for err in e.errors())
        raise ConfigError(path, errors) from e


def save_project_config(project_dir: Path, config: ProjectConfig) -> Path:
    """Save myui.config.json to project directory using camelCase keys."""
    path = config_path(project_dir)
    data = config.model_dump(by_alias=True, exclude_none=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


def create_default_config() -> ProjectConfig:
    """Create default project configuration."""
    return ProjectConfig()


def _format_validation_error(err: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in err["loc"])
    if not location:
        return err["msg"]
    return f"{location}: {err['msg']}"
