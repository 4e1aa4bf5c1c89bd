"""Application service: total a list of amounts in a single currency."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from scm.application.dto import MoneyDTO
from scm.domain.exceptions import ValidationError
from scm.domain.model.currency import Currency
from scm.domain.model.money import Money

logger = logging.getLogger(__name__)


class TotalAmountsHandler:

    def __init__(self, default_currency: str = "USD") -> None:
        self._default_currency = default_currency

    def handle(
        self,
        amounts: list[str],
        currency: str | None = None,
        multiplier: str | None = None,
    ) -> MoneyDTO:
        """Sum *amounts*, then optionally scale the total by *multiplier*."""
        if not amounts:
            raise ValidationError("At least one amount is required")

        code = Currency(currency or self._default_currency)
        total = Money.zero(code)
        for raw in amounts:
            total = total + Money.of(raw, code)

        if multiplier is not None:
            try:
                factor = Decimal(multiplier.strip())
            except InvalidOperation as exc:
                raise ValidationError(f"Invalid multiplier: {multiplier!r}") from exc
            total = total * factor

        logger.info("Totalled %d amount(s) to %s", len(amounts), total)
        return MoneyDTO.from_money(total)
