"""Builders for registry indexes and component sources used across tests."""

import json
from pathlib import Path
from typing import Any

from ui_scaffold.io import parse_registry_index, save_project_config
from ui_scaffold.models.config import ProjectConfig
from ui_scaffold.models.registry import RegistryIndex

BUTTON_SOURCE = """import * as React from "react"
import { cn } from "@/lib/utils"

export function Button(props: React.ButtonHTMLAttributes<HTMLButtonElement>) {
  return <button className={cn("btn")} {...props} />
}
"""

CARD_SOURCE = """import * as React from "react"
import { Button } from "@/components/ui/button"
import { cn } from "@/lib/utils"

export function Card({ children }: { children: React.ReactNode }) {
  return <div className={cn("card")}>{children}<Button /></div>
}
"""

UTILS_SOURCE = """export function cn(...classes: string[]) {
  return classes.filter(Boolean).join(" ")
}
"""


def make_index(entries: dict[str, dict[str, Any]]) -> RegistryIndex:
    """Build an index the same way registry.json is parsed."""
    return parse_registry_index(json.dumps(entries))


def sample_registry() -> dict[str, dict[str, Any]]:
    """button <- card, plus a non-ui utils entry that button depends on."""
    return {
        "utils": {
            "type": "components:lib",
            "files": ["lib/utils.ts"],
            "dependencies": ["tailwind-merge"],
        },
        "button": {
            "type": "components:ui",
            "files": ["ui/button.tsx"],
            "dependencies": ["clsx"],
            "registryDependencies": ["utils"],
        },
        "card": {
            "type": "components:ui",
            "files": ["ui/card.tsx"],
            "devDependencies": ["@types/react"],
            "registryDependencies": ["button"],
            "tailwind": {"config": {"plugins": ["require(\"tailwindcss-animate\")"]}},
        },
    }


def sample_artifacts() -> dict[str, str]:
    return {
        "lib/utils.ts": UTILS_SOURCE,
        "ui/button.tsx": BUTTON_SOURCE,
        "ui/card.tsx": CARD_SOURCE,
    }


def init_project(project_dir: Path, config: ProjectConfig | None = None) -> ProjectConfig:
    """Write myui.config.json into project_dir and return the config."""
    resolved = config if config is not None else ProjectConfig()
    save_project_config(project_dir, resolved)
    return resolved
