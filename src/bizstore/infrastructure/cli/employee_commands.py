"""Employees screen."""

from __future__ import annotations

import click

from bizstore.application.add_employee import AddEmployeeHandler
from bizstore.application.show_employees import ShowEmployeesHandler
from bizstore.domain.model.company import Company
from bizstore.domain.model.value_objects import parse_decimal
from bizstore.infrastructure.cli.menu import INVALID_CHOICE, MenuState, ask


def employees_screen(company: Company, currency_symbol: str = "$") -> MenuState:
    """List employees, then handle one choice.

    Returns MenuState.MAIN when the operator asks for the main menu.
    """
    click.echo()
    click.echo("Current Employees:")
    for line in ShowEmployeesHandler(company, currency_symbol).handle():
        click.echo(
            f"{line.name} <{line.email}>  Phone: {line.phone}  Salary: {line.salary}"
        )

    choice = ask("(A)dd Employee or (M)ain Menu?").upper()

    if choice == "A":
        name = ask("Name:")
        email = ask("Email:")
        phone = ask("Phone:")
        # A malformed salary raises ParseFailure and ends the session.
        salary = parse_decimal(ask("Salary:"))
        AddEmployeeHandler(company).handle(name, email, phone, salary)
    elif choice == "M":
        return MenuState.MAIN
    else:
        click.echo(INVALID_CHOICE)

    return MenuState.EMPLOYEES
