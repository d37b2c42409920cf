"""Project configuration models for myui.config.json."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ui_scaffold.constants import DEFAULT_COMPONENTS_DIR

Style = Literal["default", "new-york"]


class Aliases(BaseModel):
    """Import aliases used when rewriting component sources.

    Each value is the specifier the consumer project uses, e.g. "@/lib/utils"
    or "~/components/ui".
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    components: str = "@/components"
    utils: str = "@/lib/utils"
    ui: str = "@/components/ui"
    lib: str = "@/lib"
    hooks: str = "@/hooks"

    @field_validator("components", "utils", "ui", "lib", "hooks")
    @classmethod
    def validate_alias(cls, v: str) -> str:
        """Validate alias is a usable import specifier."""
        if not v.strip():
            msg = "Alias cannot be empty"
            raise ValueError(msg)
        if any(ch in v for ch in "\"'` \t\n"):
            msg = f"Alias contains quotes or whitespace: {v!r}"
            raise ValueError(msg)
        return v.rstrip("/")


class ProjectConfig(BaseModel):
    """Consumer project configuration.

    Loaded once at the start of a command and never mutated. Unrecognized
    keys are rejected so typos surface at load time instead of being ignored.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    style: Style = "default"
    tsx: bool = True
    components_dir: str = Field(default=DEFAULT_COMPONENTS_DIR, alias="componentsDir")
    aliases: Aliases = Field(default_factory=Aliases)
    package_manager: str | None = Field(default=None, alias="packageManager")

    @field_validator("components_dir")
    @classmethod
    def validate_components_dir(cls, v: str) -> str:
        """Validate components directory is non-empty."""
        if not v.strip():
            msg = "componentsDir cannot be empty"
            raise ValueError(msg)
        return v

    def ui_dir(self, project_dir: Path) -> Path:
        """Directory that component files are written to by default."""
        return (project_dir / self.components_dir).resolve()
