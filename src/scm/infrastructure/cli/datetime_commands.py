"""CLI commands for the DateTime value object."""

from __future__ import annotations

import click

from scm.domain.exceptions import DomainException
from scm.domain.model.date_time import DateTime


@click.command("show")
@click.argument("value", required=False)
def datetime_show(value: str | None) -> None:
    """Show VALUE (default: now) in ISO-8601 and human-readable form."""
    try:
        moment = DateTime(value)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"ISO:   {moment.to_iso_string()}")
    click.echo(f"Human: {moment}")
