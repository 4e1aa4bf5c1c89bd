"""Money value object.

Money is immutable and compared by value. Amounts are held as Decimal and
always quantized to two places, so repeated arithmetic never accumulates
floating-point drift.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal, DecimalException, InvalidOperation

from scm.domain.exceptions import ValidationError
from scm.domain.model.currency import Currency

_CENTS = Decimal("0.01")

# Amounts are limited to this many integer digits (every finite float fits).
MAX_AMOUNT_DIGITS = 1000

# Wide enough to hold any allowed amount to the cent, and the exact sum or
# product of two of them, so rounding only ever happens at the cents place.
_CONTEXT = Context(prec=2 * MAX_AMOUNT_DIGITS + 8, rounding=ROUND_HALF_UP)

Number = int | float | Decimal


def _to_decimal(value: object) -> Decimal | None:
    """Coerce a numeric value to a finite Decimal, or None if it isn't one.

    Floats go through ``repr`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    try:
        result = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, ValueError):
        return None
    if not result.is_finite():
        return None
    return result


def _round(amount: Decimal) -> Decimal:
    if amount.adjusted() >= MAX_AMOUNT_DIGITS:
        raise ValidationError(
            f"amount must have at most {MAX_AMOUNT_DIGITS} integer digits"
        )
    rounded = amount.quantize(_CENTS, context=_CONTEXT)
    if rounded.is_zero():
        # drop the sign of -0.00
        return Decimal("0.00")
    return rounded


@dataclass(frozen=True)
class Money:
    """A non-negative amount in a given currency.

    Accepts ``int``, ``float`` or ``Decimal`` amounts; the stored amount is a
    Decimal rounded half-up to two decimal places. Every operation returns a
    new instance.
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        amount = _to_decimal(self.amount)
        if amount is None or amount < 0:
            raise ValidationError("amount must be a positive number")
        if not isinstance(self.currency, Currency):
            raise ValidationError("currency must be a Currency instance")
        # frozen dataclass: bypass __setattr__ to store the normalized amount
        object.__setattr__(self, "amount", _round(amount))

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        """Return the sum of two amounts in the same currency."""
        if not isinstance(other, Money) or self.currency != other.currency:
            raise ValidationError("Can only add Money with the same currency")
        return Money(_CONTEXT.add(self.amount, other.amount), self.currency)

    def multiply(self, multiplier: Number) -> Money:
        """Return this amount scaled by a finite, non-negative multiplier."""
        factor = _to_decimal(multiplier)
        if factor is None or factor < 0:
            raise ValidationError("multiplier must be a positive number")
        try:
            product = _CONTEXT.multiply(self.amount, factor)
        except DecimalException as exc:
            raise ValidationError(
                f"amount must have at most {MAX_AMOUNT_DIGITS} integer digits"
            ) from exc
        return Money(product, self.currency)

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __mul__(self, multiplier: Number) -> Money:
        return self.multiply(multiplier)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.currency.code} {self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | Number, currency: str | Currency = "USD") -> Money:
        """Convenient factory that accepts string amounts and currency codes."""
        if not isinstance(currency, Currency):
            currency = Currency(currency)
        if isinstance(amount, str):
            try:
                amount = Decimal(amount.strip())
            except InvalidOperation as exc:
                raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(amount, currency)

    @staticmethod
    def zero(currency: Currency) -> Money:
        return Money(Decimal("0"), currency)
