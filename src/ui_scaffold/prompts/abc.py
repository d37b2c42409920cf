"""Interactive decisions needed during `add`.

This is the only place human input enters an install run. Everything else is
driven by the requested names, the registry index and the project config.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from ui_scaffold.models.registry import ComponentEntry


class Prompter(ABC):
    """Abstract interface for user prompts."""

    @abstractmethod
    def confirm(self, message: str, *, default: bool) -> bool:
        """Ask a yes/no question."""
        ...

    @abstractmethod
    def confirm_overwrite(self, path: Path) -> bool:
        """Ask whether an existing file may be replaced. Declining skips it."""
        ...

    @abstractmethod
    def select_components(self, choices: Sequence[ComponentEntry]) -> list[str]:
        """Let the user pick components; an empty list means nothing was chosen."""
        ...
