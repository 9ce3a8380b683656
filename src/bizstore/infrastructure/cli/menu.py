"""Menu states and console prompting shared by every screen."""

from __future__ import annotations

from enum import Enum

import click

INVALID_CHOICE = "Invalid choice, try again."


class MenuState(Enum):
    MAIN = "MAIN"
    EMPLOYEES = "EMPLOYEES"
    SALES = "SALES"
    QUIT = "QUIT"


def ask(label: str) -> str:
    """Prompt for one line of input; an empty answer is returned as ''."""
    return click.prompt(label, default="", show_default=False, prompt_suffix=" ")
