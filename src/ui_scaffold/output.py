"""Output helpers with clear intent.

- user_output: status messages, prompts context and errors (stderr)
- machine_output: data meant to be piped or parsed (stdout)
"""

import click


def user_output(message: str = "") -> None:
    """Write a user-facing message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write structured output to stdout."""
    click.echo(message)
