"""Domain-level exceptions.

Programming and validation errors are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages. Expected business outcomes (insufficient stock,
empty cart, declined payment) are *not* exceptions; they are reported
through return values.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value violated an invariant (negative price, negative stock...)."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PermissionDeniedError(DomainException):
    """The acting user's role does not allow the operation."""
