"""Terminal input/output used by the menus and the quiz session."""

from collections.abc import Sequence
from typing import Protocol

import click


class Console(Protocol):
    """What the session flow needs from the terminal."""

    def present_options(self, prompt: str, options: Sequence[tuple[int, str]]) -> int:
        """Show numbered options and read an integer choice.

        The returned number is not checked against the option keys.
        """
        ...

    def present_text(self, prompt: str) -> str:
        """Read one line of free text."""
        ...

    def present_message(self, text: str) -> None:
        """Show a line of output."""
        ...


class ClickConsole:
    """Console backed by click prompts.

    Non-numeric input to an option prompt is rejected and asked again by
    click itself.
    """

    def present_options(self, prompt: str, options: Sequence[tuple[int, str]]) -> int:
        for key, label in options:
            click.echo(f"{key}. {label}")
        return click.prompt(prompt, type=int, prompt_suffix=": ")

    def present_text(self, prompt: str) -> str:
        return click.prompt(prompt, type=str, default="", show_default=False, prompt_suffix=": ")

    def present_message(self, text: str) -> None:
        click.echo(text)
