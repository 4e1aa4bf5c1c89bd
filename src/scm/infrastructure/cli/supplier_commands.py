"""CLI commands for the Supplier aggregate."""

from __future__ import annotations

import click

from scm.domain.exceptions import DomainException
from scm.infrastructure.bootstrap import register_supplier_handler


@click.command("register")
@click.option("--name", required=True, help="Supplier name (2-100 characters).")
@click.option("--id", "supplier_id", default=None, help="Existing supplier UUID.")
@click.option("--email", default=None, help="Contact email address.")
@click.option("--last-order-total", default=None, help="Last order total (e.g. 150.00).")
@click.option("--currency", default=None, help="Currency of the last order total.")
def supplier_register(
    name: str,
    supplier_id: str | None,
    email: str | None,
    last_order_total: str | None,
    currency: str | None,
) -> None:
    """Validate and register a supplier."""
    handler = register_supplier_handler()

    try:
        dto = handler.handle(
            name=name,
            contact_email=email,
            last_order_total=last_order_total,
            currency=currency,
            supplier_id=supplier_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier {dto.id} registered")
    click.echo(f"Name:             {dto.name}")
    click.echo(f"Contact email:    {dto.contact_email or '-'}")
    click.echo(f"Last order total: {dto.last_order_total_price or '-'}")
