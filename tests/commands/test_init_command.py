"""CLI tests for `ui-scaffold init`."""

import json
from pathlib import Path

from click.testing import CliRunner

from ui_scaffold.cli import cli
from ui_scaffold.context import ScaffoldContext


def test_init_creates_default_config(tmp_path: Path) -> None:
    ctx = ScaffoldContext.for_test(cwd=tmp_path)

    result = CliRunner().invoke(cli, ["init"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Config created at myui.config.json" in result.output
    data = json.loads((tmp_path / "myui.config.json").read_text(encoding="utf-8"))
    assert data["componentsDir"] == "components/ui"
    assert data["aliases"]["utils"] == "@/lib/utils"


def test_init_does_not_overwrite_without_force(tmp_path: Path) -> None:
    config = tmp_path / "myui.config.json"
    config.write_text('{"tsx": false}\n', encoding="utf-8")
    ctx = ScaffoldContext.for_test(cwd=tmp_path)

    result = CliRunner().invoke(cli, ["init"], obj=ctx)

    assert result.exit_code == 0
    assert "Config file already exists." in result.output
    assert "--force" in result.output
    assert config.read_text(encoding="utf-8") == '{"tsx": false}\n'


def test_init_force_overwrites(tmp_path: Path) -> None:
    config = tmp_path / "myui.config.json"
    config.write_text('{"tsx": false}\n', encoding="utf-8")
    ctx = ScaffoldContext.for_test(cwd=tmp_path)

    result = CliRunner().invoke(cli, ["init", "--force"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert json.loads(config.read_text(encoding="utf-8"))["tsx"] is True


def test_init_with_cwd(tmp_path: Path) -> None:
    project = tmp_path / "web"
    project.mkdir()
    ctx = ScaffoldContext.for_test(cwd=tmp_path)

    result = CliRunner().invoke(cli, ["init", "-c", str(project)], obj=ctx)

    assert result.exit_code == 0, result.output
    assert (project / "myui.config.json").exists()
    assert not (tmp_path / "myui.config.json").exists()
