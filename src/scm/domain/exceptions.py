"""Domain-level exceptions.

Every invariant violation in the model is expressed as a ValidationError,
a subclass of DomainException, so the CLI layer can catch them uniformly
and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value or mutation violated a documented invariant."""
