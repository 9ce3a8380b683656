import logging
import sys

import click

from bizstore.application.open_company import OpenCompanyHandler
from bizstore.application.save_company import SaveCompanyHandler
from bizstore.domain.exceptions import ParseFailure
from bizstore.infrastructure.bootstrap import company_repository
from bizstore.infrastructure.cli.menu import ask
from bizstore.infrastructure.cli.shell import Shell
from bizstore.infrastructure.config import Settings, get_settings


def _setup_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )


@click.command()
def cli() -> None:
    """bizstore: employee, customer and sales records"""
    settings = get_settings()
    _setup_logging(settings)

    repo = company_repository(ask("Enter the company name (without extension):"))
    opened = OpenCompanyHandler(repo).handle()
    if opened.notice:
        click.echo(opened.notice)

    shell = Shell(opened.company, SaveCompanyHandler(repo), settings.currency_symbol)
    try:
        shell.run()
    except ParseFailure as exc:
        # Unsaved changes are lost, as with any abnormal exit.
        raise click.ClickException(str(exc))
