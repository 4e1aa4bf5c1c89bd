"""Supplier aggregate — the entry point of the supply-chain context.

A Supplier owns its contact email and the total of its last order. Both are
replaced wholesale through guarded setters; the id and name never change
after construction.
"""

from __future__ import annotations

from scm.domain.exceptions import ValidationError
from scm.domain.model.identifiers import SupplierId
from scm.domain.model.money import Money
from scm.domain.model.validation import is_valid_email

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100


class Supplier:
    """Aggregate root for suppliers.

    Invariants (checked at construction and on every mutation):
    - ``id`` is a SupplierId
    - ``name`` is a string of 2 to 100 characters
    - ``contact_email`` is None or a syntactically valid email address
    - ``last_order_total_price`` is None or a Money

    Two suppliers are the same entity when their ids are equal.
    """

    __slots__ = ("_id", "_name", "_contact_email", "_last_order_total_price")

    def __init__(
        self,
        id: SupplierId,
        name: str,
        contact_email: str | None = None,
        last_order_total_price: Money | None = None,
    ) -> None:
        if not isinstance(id, SupplierId):
            raise ValidationError("id must be a SupplierId")
        if (
            not isinstance(name, str)
            or not MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH
        ):
            raise ValidationError(
                f"name must be a string between {MIN_NAME_LENGTH} "
                f"and {MAX_NAME_LENGTH} characters"
            )
        if contact_email is not None and not is_valid_email(contact_email):
            raise ValidationError("contactEmail must be a valid email address or null")
        if last_order_total_price is not None and not isinstance(
            last_order_total_price, Money
        ):
            raise ValidationError("lastOrderTotalPrice must be a Money object or null")

        self._id = id
        self._name = name
        self._contact_email = contact_email
        self._last_order_total_price = last_order_total_price

    # --- Factory (used for NEW suppliers only) --------------------------------

    @staticmethod
    def create(
        name: str,
        contact_email: str | None = None,
        last_order_total_price: Money | None = None,
    ) -> Supplier:
        """Register a new supplier under a freshly generated id."""
        return Supplier(
            id=SupplierId.generate(),
            name=name,
            contact_email=contact_email,
            last_order_total_price=last_order_total_price,
        )

    # --- Identity -------------------------------------------------------------

    @property
    def id(self) -> SupplierId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    # --- Mutable fields -------------------------------------------------------

    @property
    def contact_email(self) -> str | None:
        return self._contact_email

    @contact_email.setter
    def contact_email(self, value: str) -> None:
        """Replace the contact email.

        ``None`` is rejected here; use ``clear_contact_email()`` to remove it.
        """
        if value is None or not is_valid_email(value):
            raise ValidationError("contactEmail must be a valid email address")
        self._contact_email = value

    def clear_contact_email(self) -> None:
        self._contact_email = None

    @property
    def last_order_total_price(self) -> Money | None:
        return self._last_order_total_price

    @last_order_total_price.setter
    def last_order_total_price(self, value: Money) -> None:
        """Record the total of the most recent order placed with this supplier."""
        if not isinstance(value, Money):
            raise ValidationError("lastOrderTotalPrice must be a Money object")
        self._last_order_total_price = value

    def clear_last_order_total_price(self) -> None:
        self._last_order_total_price = None

    # --- Entity semantics -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Supplier):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Supplier(id={self._id.value!r}, name={self._name!r})"
