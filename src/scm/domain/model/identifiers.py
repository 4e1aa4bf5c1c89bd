"""UUID-backed identifier value objects.

Each aggregate gets its own identifier type. They share a representation
but are deliberately not interchangeable: a SupplierId never equals a
ProductId, even when both wrap the same UUID string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from scm.domain.exceptions import ValidationError
from scm.domain.model.validation import generate_uuid, is_valid_uuid


@dataclass(frozen=True)
class _UuidIdentifier:
    value: str

    def __post_init__(self) -> None:
        if not is_valid_uuid(self.value):
            raise ValidationError(f"Invalid {type(self).__name__}: {self.value}")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> Self:
        """Build an identifier around a freshly generated random UUID."""
        return cls(generate_uuid())


@dataclass(frozen=True)
class SupplierId(_UuidIdentifier):
    """Identity of a Supplier aggregate."""


@dataclass(frozen=True)
class ProductId(_UuidIdentifier):
    """Identity of a product in the catalog."""
