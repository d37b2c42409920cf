"""Fake prompter for testing."""

from collections.abc import Iterable, Sequence
from pathlib import Path

from ui_scaffold.models.registry import ComponentEntry
from ui_scaffold.prompts.abc import Prompter


class FakePrompter(Prompter):
    """In-memory fake returning predetermined answers.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        confirm_answer: bool = True,
        overwrite_answer: bool = False,
        selection: Iterable[str] = (),
        overwrite_raises: type[BaseException] | None = None,
    ) -> None:
        """Create FakePrompter.

        Args:
            confirm_answer: Returned from confirm()
            overwrite_answer: Returned from confirm_overwrite()
            selection: Returned from select_components()
            overwrite_raises: Raised from confirm_overwrite() instead of answering,
                e.g. KeyboardInterrupt or click.Abort for a Ctrl-C at the prompt
        """
        self._confirm_answer = confirm_answer
        self._overwrite_answer = overwrite_answer
        self._selection = list(selection)
        self._overwrite_raises = overwrite_raises
        self._confirm_messages: list[str] = []
        self._overwrite_paths: list[Path] = []
        self._selection_choices: list[list[str]] = []

    @property
    def confirm_messages(self) -> list[str]:
        return self._confirm_messages

    @property
    def overwrite_paths(self) -> list[Path]:
        return self._overwrite_paths

    @property
    def selection_choices(self) -> list[list[str]]:
        return self._selection_choices

    def confirm(self, message: str, *, default: bool) -> bool:
        self._confirm_messages.append(message)
        return self._confirm_answer

    def confirm_overwrite(self, path: Path) -> bool:
        self._overwrite_paths.append(path)
        if self._overwrite_raises is not None:
            raise self._overwrite_raises()
        return self._overwrite_answer

    def select_components(self, choices: Sequence[ComponentEntry]) -> list[str]:
        self._selection_choices.append([entry.name for entry in choices])
        return list(self._selection)
