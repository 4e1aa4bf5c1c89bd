import click

from scm.infrastructure.bootstrap import configure_logging
from scm.infrastructure.cli.datetime_commands import datetime_show
from scm.infrastructure.cli.identifier_commands import id_check, id_generate
from scm.infrastructure.cli.money_commands import money_total
from scm.infrastructure.cli.supplier_commands import supplier_register


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """SCM — Supply-Chain domain model console"""
    configure_logging(verbose)


@cli.group()
def supplier() -> None:
    """Manage suppliers."""


@cli.group()
def money() -> None:
    """Money arithmetic."""


@cli.group("id")
def identifier() -> None:
    """Supplier and product identifiers."""


@cli.group("datetime")
def date_time() -> None:
    """Date and time values."""


# Register subcommands
supplier.add_command(supplier_register)
money.add_command(money_total)
identifier.add_command(id_check)
identifier.add_command(id_generate)
date_time.add_command(datetime_show)
