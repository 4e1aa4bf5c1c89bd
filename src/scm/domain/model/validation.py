"""Validation primitives used by the value objects and the Supplier aggregate.

These are pure functions with no knowledge of the domain types; they only
answer "is this string well-formed?" or produce a fresh identifier.
"""

from __future__ import annotations

import uuid

from email_validator import EmailNotValidError, validate_email


def generate_uuid() -> str:
    """Return a fresh random (version 4) UUID in canonical lowercase form."""
    return str(uuid.uuid4())


def is_valid_uuid(value: object) -> bool:
    """True if *value* is a UUID string in canonical 8-4-4-4-12 hex form.

    ``uuid.UUID`` also accepts braces, ``urn:uuid:`` prefixes and hyphen-less
    hex, so the parsed value is compared back against its canonical rendering.
    """
    if not isinstance(value, str):
        return False
    try:
        parsed = uuid.UUID(value)
    except ValueError:
        return False
    return str(parsed) == value.lower()


def is_valid_email(value: object) -> bool:
    """True if *value* is a syntactically valid email address.

    Deliverability (DNS lookups) is never checked.
    """
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True
