"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from scm.domain.model.money import Money
from scm.domain.model.supplier import Supplier


@dataclass(frozen=True)
class SupplierDTO:
    """Output: a supplier as displayed to the user."""

    id: str
    name: str
    contact_email: str | None
    last_order_total_price: str | None  # formatted, e.g. "USD 100.00"

    @staticmethod
    def from_supplier(supplier: Supplier) -> SupplierDTO:
        price = supplier.last_order_total_price
        return SupplierDTO(
            id=supplier.id.value,
            name=supplier.name,
            contact_email=supplier.contact_email,
            last_order_total_price=str(price) if price is not None else None,
        )


@dataclass(frozen=True)
class MoneyDTO:
    """Output: a monetary amount."""

    currency: str
    amount: str
    display: str

    @staticmethod
    def from_money(money: Money) -> MoneyDTO:
        return MoneyDTO(
            currency=money.currency.code,
            amount=f"{money.amount:.2f}",
            display=str(money),
        )
