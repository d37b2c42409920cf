"""Registry index models."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ui_scaffold.constants import UI_COMPONENT_KIND


class TailwindConfig(BaseModel):
    """Tailwind config fragment a component needs in the consumer project."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    plugins: tuple[str, ...] = ()

    @field_validator("plugins", mode="before")
    @classmethod
    def null_plugins_as_empty(cls, v: Any) -> Any:
        return () if v is None else v


class TailwindMetadata(BaseModel):
    """Optional tailwind metadata attached to a registry entry."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    config: TailwindConfig = Field(default_factory=TailwindConfig)

    @field_validator("config", mode="before")
    @classmethod
    def null_config_as_default(cls, v: Any) -> Any:
        return {} if v is None else v


class ComponentEntry(BaseModel):
    """Component entry in registry.json.

    Unknown fields are ignored so newer registries stay readable by older
    clients.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str
    kind: str = Field(default=UI_COMPONENT_KIND, alias="type")
    files: tuple[str, ...] = ()
    dependencies: frozenset[str] = frozenset()
    dev_dependencies: frozenset[str] = Field(default=frozenset(), alias="devDependencies")
    registry_dependencies: tuple[str, ...] = Field(default=(), alias="registryDependencies")
    tailwind: TailwindMetadata | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate component name is non-empty."""
        if not v.strip():
            msg = "Component name cannot be empty"
            raise ValueError(msg)
        return v

    @field_validator(
        "files", "dependencies", "dev_dependencies", "registry_dependencies", mode="before"
    )
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """Registries write null for an empty list; treat it as absent."""
        if v is None:
            return ()
        return v

    @field_validator("registry_dependencies")
    @classmethod
    def dedupe_registry_dependencies(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Drop repeated names while keeping declaration order."""
        return tuple(dict.fromkeys(v))

    @model_validator(mode="after")
    def validate_no_self_dependency(self) -> "ComponentEntry":
        """A component may not list itself as a registry dependency."""
        if self.name in self.registry_dependencies:
            msg = f"Component '{self.name}' lists itself in registryDependencies"
            raise ValueError(msg)
        return self

    @property
    def is_ui_component(self) -> bool:
        return self.kind == UI_COMPONENT_KIND

    @property
    def tailwind_plugins(self) -> tuple[str, ...]:
        if self.tailwind is None:
            return ()
        return self.tailwind.config.plugins


@dataclass(frozen=True)
class RegistryIndex:
    """Immutable mapping of component name to entry, loaded once per run."""

    entries: Mapping[str, ComponentEntry] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Detach from the caller's dict so later mutation cannot leak in
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def get(self, name: str) -> ComponentEntry | None:
        return self.entries.get(name)

    def names(self) -> list[str]:
        """All component names, sorted."""
        return sorted(self.entries)

    def ui_components(self) -> list[ComponentEntry]:
        """Entries offered to users by `add` and `list`, sorted by name."""
        return [self.entries[name] for name in self.names() if self.entries[name].is_ui_component]
