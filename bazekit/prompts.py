"""Interactive prompt capability used by the actions."""

from __future__ import annotations

from typing import Protocol

import click

YES_ANSWERS = {"y", "yes"}


def is_yes(answer: str) -> bool:
    return answer.strip().lower() in YES_ANSWERS


class Prompter(Protocol):
    def confirm(self, message: str) -> bool: ...

    def ask(self, message: str, default: str) -> str: ...


class TerminalPrompter:
    """Line-based prompts on stdin. Blank or unrecognised answers mean no."""

    def confirm(self, message: str) -> bool:
        answer = click.prompt(
            message, default="", show_default=False, prompt_suffix=" [y/N]: "
        )
        return is_yes(answer)

    def ask(self, message: str, default: str) -> str:
        answer = click.prompt(
            f"{message} ({default})", default="", show_default=False, prompt_suffix=": "
        )
        return answer.strip() or default
