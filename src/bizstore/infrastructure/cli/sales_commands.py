"""Sales screen: customers, their sales and order histories."""

from __future__ import annotations

import click

from bizstore.application.add_customer import AddCustomerHandler
from bizstore.application.list_customers import ListCustomersHandler
from bizstore.application.record_sale import RecordSaleHandler
from bizstore.application.select_customer import SelectCustomerHandler
from bizstore.application.show_customer import ShowCustomerHandler
from bizstore.domain.exceptions import EntityNotFoundError, ValidationError
from bizstore.domain.model.company import Company
from bizstore.domain.model.value_objects import parse_decimal, parse_int
from bizstore.infrastructure.cli.menu import INVALID_CHOICE, MenuState, ask

ORDER_HISTORY_HEADER = "Item                   Price  Quantity   Total"


def sales_screen(company: Company) -> MenuState:
    """Handle one choice on the sales menu.

    Returns MenuState.MAIN when the operator asks for the main menu.
    """
    choice = ask("(A)dd Customer, Enter a (S)ale, (V)iew Customer, or (M)ain Menu?").upper()

    if choice == "A":
        _add_customer(company)
    elif choice == "S":
        _enter_sale(company)
    elif choice == "V":
        _view_customer(company)
    elif choice == "M":
        return MenuState.MAIN
    else:
        click.echo(INVALID_CHOICE)

    return MenuState.SALES


def _add_customer(company: Company) -> None:
    name = ask("Name:")
    email = ask("Email:")
    phone = ask("Phone:")
    AddCustomerHandler(company).handle(name, email, phone)


def _pick_customer(company: Company) -> int | None:
    """Show the numbered customer list and read a choice.

    Returns the 0-based index, or None when the action should be
    abandoned.  A non-numeric answer raises ParseFailure.
    """
    try:
        choices = ListCustomersHandler(company).handle()
    except EntityNotFoundError as exc:
        click.echo(f"Error: {exc}")
        return None

    for entry in choices:
        click.echo(f"{entry.number}.) {entry.name}")

    try:
        return SelectCustomerHandler(company).handle(ask("Choice?"))
    except ValidationError:
        click.echo(INVALID_CHOICE)
        return None


def _enter_sale(company: Company) -> None:
    index = _pick_customer(company)
    if index is None:
        return

    item = ask("Item:")
    quantity = parse_int(ask("Quantity:"))
    cost = parse_decimal(ask("Cost:"))
    RecordSaleHandler(company).handle(index, item, quantity, cost)


def _view_customer(company: Company) -> None:
    index = _pick_customer(company)
    if index is None:
        return

    dto = ShowCustomerHandler(company).handle(index)
    click.echo(f"{dto.name} <{dto.email}>  Phone: {dto.phone}")
    click.echo()
    click.echo("Order History")
    click.echo(ORDER_HISTORY_HEADER)
    for line in dto.sales:
        click.echo(f"{line.item:<20} {line.price:<6} {line.quantity:<10} {line.total}")
