"""Domain-level exceptions.

All errors raised below the CLI are subclasses of DomainException so the
shell can decide, per case, which ones it recovers from and which ones end
the session.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A selection or value falls outside what the model accepts."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ParseFailure(DomainException):
    """Operator input could not be read as a number."""


class StorageError(DomainException):
    """The backing store could not be read or written."""
