"""Tests for myui.config.json loading and saving."""

import json
from pathlib import Path

import pytest

from ui_scaffold.exceptions import ConfigError
from ui_scaffold.io import (
    config_path,
    create_default_config,
    load_project_config,
    save_project_config,
)
from ui_scaffold.models.config import Aliases, ProjectConfig


def test_load_missing_config_returns_none(tmp_path: Path) -> None:
    assert load_project_config(tmp_path) is None


def test_save_writes_camel_case_keys(tmp_path: Path) -> None:
    path = save_project_config(tmp_path, create_default_config())

    data = json.loads(path.read_text(encoding="utf-8"))
    assert path == config_path(tmp_path)
    assert data == {
        "style": "default",
        "tsx": True,
        "componentsDir": "components/ui",
        "aliases": {
            "components": "@/components",
            "utils": "@/lib/utils",
            "ui": "@/components/ui",
            "lib": "@/lib",
            "hooks": "@/hooks",
        },
    }


def test_save_then_load(tmp_path: Path) -> None:
    config = ProjectConfig(
        style="new-york",
        tsx=False,
        components_dir="src/ui",
        aliases=Aliases(ui="~/ui"),
        package_manager="pnpm",
    )

    save_project_config(tmp_path, config)

    assert load_project_config(tmp_path) == config


def test_load_partial_config_fills_defaults(tmp_path: Path) -> None:
    config_path(tmp_path).write_text(
        json.dumps({"componentsDir": "app/ui", "aliases": {"utils": "~/cn/"}}), encoding="utf-8"
    )

    config = load_project_config(tmp_path)

    assert config is not None
    assert config.components_dir == "app/ui"
    assert config.aliases.utils == "~/cn"
    assert config.aliases.ui == "@/components/ui"
    assert config.tsx is True


def test_ui_dir_is_resolved(tmp_path: Path) -> None:
    config = ProjectConfig(components_dir="src/../components/ui")

    assert config.ui_dir(tmp_path) == (tmp_path / "components" / "ui").resolve()


def test_invalid_json_raises_config_error(tmp_path: Path) -> None:
    config_path(tmp_path).write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="not valid JSON"):
        load_project_config(tmp_path)


def test_non_object_raises_config_error(tmp_path: Path) -> None:
    config_path(tmp_path).write_text("[]", encoding="utf-8")

    with pytest.raises(ConfigError, match="expected a JSON object"):
        load_project_config(tmp_path)


def test_unknown_key_rejected(tmp_path: Path) -> None:
    config_path(tmp_path).write_text(json.dumps({"componentDir": "x"}), encoding="utf-8")

    with pytest.raises(ConfigError) as exc_info:
        load_project_config(tmp_path)

    assert "componentDir" in exc_info.value.reason


def test_invalid_style_rejected(tmp_path: Path) -> None:
    config_path(tmp_path).write_text(json.dumps({"style": "fancy"}), encoding="utf-8")

    with pytest.raises(ConfigError, match="style"):
        load_project_config(tmp_path)


@pytest.mark.parametrize("alias", ["", "  ", '@/lib"', "@/my lib"])
def test_invalid_alias_rejected(alias: str) -> None:
    with pytest.raises(ValueError):
        Aliases(utils=alias)


def test_config_is_frozen() -> None:
    config = create_default_config()

    with pytest.raises(ValueError):
        config.tsx = False  # type: ignore[misc]
