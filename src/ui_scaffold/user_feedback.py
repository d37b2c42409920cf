"""User-facing progress output during installs."""

from abc import ABC, abstractmethod

import click

from ui_scaffold.output import user_output


class UserFeedback(ABC):
    """Progress messages emitted while installing components.

    Two implementations:
    - InteractiveFeedback: styled messages on stderr
    - RecordingFeedback: messages kept in memory for tests
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class RecordingFeedback(UserFeedback):
    """Feedback that records messages instead of printing them.

    Used by tests and by callers that render progress themselves.
    """

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    @property
    def messages(self) -> list[tuple[str, str]]:
        """(level, message) pairs in emission order."""
        return self._messages

    def text(self) -> str:
        return "\n".join(message for _, message in self._messages)

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def warning(self, message: str) -> None:
        self._messages.append(("warning", message))

    def error(self, message: str) -> None:
        self._messages.append(("error", message))
