"""Prompter backed by click prompts on the terminal."""

from collections.abc import Sequence
from pathlib import Path

import click

from ui_scaffold.models.registry import ComponentEntry
from ui_scaffold.output import user_output
from ui_scaffold.prompts.abc import Prompter


class ClickPrompter(Prompter):
    """Production implementation prompting on stderr."""

    def confirm(self, message: str, *, default: bool) -> bool:
        return click.confirm(message, default=default, err=True)

    def confirm_overwrite(self, path: Path) -> bool:
        return click.confirm(f"{path.name} already exists. Overwrite?", default=False, err=True)

    def select_components(self, choices: Sequence[ComponentEntry]) -> list[str]:
        user_output(click.style("Available components:", bold=True))
        for i, entry in enumerate(choices, start=1):
            files = ", ".join(entry.files)
            user_output(f"  {i:>3}. {entry.name}  " + click.style(files, dim=True))

        raw = click.prompt(
            "Which components would you like to add? (names or numbers, comma-separated)",
            default="",
            show_default=False,
            err=True,
        )
        return parse_selection(raw, [entry.name for entry in choices])


def parse_selection(raw: str, names: Sequence[str]) -> list[str]:
    """Turn "1, card,3" into component names.

    Numbers are 1-based positions in names. Anything else is taken as a name
    and validated later by resolution.
    """
    selected: list[str] = []
    for token in raw.replace(",", " ").split():
        if token.isdigit() and 1 <= int(token) <= len(names):
            selected.append(names[int(token) - 1])
        else:
            selected.append(token)
    return list(dict.fromkeys(selected))
