"""Application service: Register Supplier use case."""

from __future__ import annotations

import logging

from scm.application.dto import SupplierDTO
from scm.domain.exceptions import ValidationError
from scm.domain.model.identifiers import SupplierId
from scm.domain.model.money import Money
from scm.domain.model.supplier import Supplier

logger = logging.getLogger(__name__)


class RegisterSupplierHandler:

    def __init__(self, default_currency: str = "USD") -> None:
        self._default_currency = default_currency

    def handle(
        self,
        name: str,
        contact_email: str | None = None,
        last_order_total: str | None = None,
        currency: str | None = None,
        supplier_id: str | None = None,
    ) -> SupplierDTO:
        """Build a new Supplier from raw input.

        A fresh id is generated unless *supplier_id* is given. The last order
        total, when present, is read in *currency* (or the default currency).
        """
        try:
            price = None
            if last_order_total is not None:
                price = Money.of(last_order_total, currency or self._default_currency)

            if supplier_id is None:
                supplier = Supplier.create(
                    name=name,
                    contact_email=contact_email,
                    last_order_total_price=price,
                )
            else:
                supplier = Supplier(
                    id=SupplierId(supplier_id),
                    name=name,
                    contact_email=contact_email,
                    last_order_total_price=price,
                )
        except ValidationError as exc:
            logger.debug("Rejected supplier registration for %r: %s", name, exc)
            raise

        logger.info("Registered supplier %s (%s)", supplier.id, supplier.name)
        return SupplierDTO.from_supplier(supplier)
