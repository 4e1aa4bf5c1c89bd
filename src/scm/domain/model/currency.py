"""Currency value object."""

from __future__ import annotations

from dataclasses import dataclass

from scm.domain.exceptions import ValidationError

VALID_CURRENCY_CODES: frozenset[str] = frozenset({"USD", "EUR", "GBP", "JPY"})


@dataclass(frozen=True)
class Currency:
    """An ISO 4217 currency code from the supported set.

    Two currencies are equal when their codes are equal.
    """

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or self.code not in VALID_CURRENCY_CODES:
            raise ValidationError(f"Invalid currency code: {self.code}")

    def __str__(self) -> str:
        return self.code
