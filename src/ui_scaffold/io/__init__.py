"""I/O operations for ui-scaffold."""

from ui_scaffold.io.registry import parse_registry_index
from ui_scaffold.io.state import (
    config_path,
    create_default_config,
    load_project_config,
    save_project_config,
)

__all__ = [
    "config_path",
    "create_default_config",
    "load_project_config",
    "parse_registry_index",
    "save_project_config",
]
