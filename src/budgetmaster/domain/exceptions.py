"""Domain-level exceptions.

All failures a caller can act on are subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Required input is missing or malformed, or an invariant was violated."""


class NotFoundError(DomainException):
    """A referenced budget or product does not exist."""


class StorageUnavailableError(DomainException):
    """The underlying store cannot be reached or is not ready."""
