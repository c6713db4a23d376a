"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidItemError(ValidationError):
    """A line item was built with a negative quantity or price.

    Recoverable: the caller rejects that one item and keeps building the order.
    """


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
