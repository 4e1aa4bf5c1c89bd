"""CLI commands for Money arithmetic."""

from __future__ import annotations

import click

from scm.domain.exceptions import DomainException
from scm.infrastructure.bootstrap import total_amounts_handler


@click.command("total")
@click.argument("amounts", nargs=-1, required=True)
@click.option("--currency", default=None, help="Currency code (USD, EUR, GBP, JPY).")
@click.option("--times", "multiplier", default=None, help="Multiply the total by this factor.")
def money_total(amounts: tuple[str, ...], currency: str | None, multiplier: str | None) -> None:
    """Add AMOUNTS together in one currency."""
    handler = total_amounts_handler()

    try:
        dto = handler.handle(list(amounts), currency=currency, multiplier=multiplier)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.display)
