"""CLI commands for SupplierId / ProductId."""

from __future__ import annotations

import click

from scm.domain.exceptions import DomainException
from scm.domain.model.identifiers import ProductId, SupplierId

_KINDS = {"supplier": SupplierId, "product": ProductId}

_kind_argument = click.argument("kind", type=click.Choice(sorted(_KINDS)))


@click.command("generate")
@_kind_argument
def id_generate(kind: str) -> None:
    """Print a new identifier of the given KIND."""
    click.echo(_KINDS[kind].generate().value)


@click.command("check")
@_kind_argument
@click.argument("value")
def id_check(kind: str, value: str) -> None:
    """Check that VALUE is a valid identifier of the given KIND."""
    try:
        identifier = _KINDS[kind](value)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{type(identifier).__name__} {identifier} is valid")
