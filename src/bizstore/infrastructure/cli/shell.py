"""Interactive shell: the menu state machine.

Every screen handles a single prompt and returns the state to move to;
the loop ends in MenuState.QUIT, which is only reached after saving.
"""

from __future__ import annotations

from collections.abc import Callable

import click

from bizstore.application.save_company import SaveCompanyHandler
from bizstore.domain.exceptions import StorageError
from bizstore.domain.model.company import Company
from bizstore.infrastructure.cli.employee_commands import employees_screen
from bizstore.infrastructure.cli.menu import INVALID_CHOICE, MenuState, ask
from bizstore.infrastructure.cli.sales_commands import sales_screen


class Shell:

    def __init__(
        self,
        company: Company,
        save_handler: SaveCompanyHandler,
        currency_symbol: str = "$",
    ) -> None:
        self._company = company
        self._save_handler = save_handler
        self._screens: dict[MenuState, Callable[[], MenuState]] = {
            MenuState.MAIN: self._main_menu,
            MenuState.EMPLOYEES: lambda: employees_screen(company, currency_symbol),
            MenuState.SALES: lambda: sales_screen(company),
        }

    def run(self) -> None:
        state = MenuState.MAIN
        while state is not MenuState.QUIT:
            state = self._screens[state]()

    def _main_menu(self) -> MenuState:
        click.echo()
        click.echo("    MAIN MENU")
        click.echo("1.) Employees")
        click.echo("2.) Sales")
        click.echo("3.) Quit")
        click.echo()
        choice = ask("Choice?")

        if choice == "1":
            return MenuState.EMPLOYEES
        if choice == "2":
            return MenuState.SALES
        if choice == "3":
            self._save()
            return MenuState.QUIT

        click.echo(INVALID_CHOICE)
        return MenuState.MAIN

    def _save(self) -> None:
        # A failed save is reported and the session still ends normally.
        try:
            self._save_handler.handle(self._company)
        except StorageError as exc:
            click.echo(f"Failed to save data: {exc}")
