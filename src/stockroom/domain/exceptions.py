"""Domain-level exceptions.

Caller-correctable errors derive from DomainException so the CLI layer can
catch them uniformly and display the message. Unrecoverable store failures
derive from FatalStoreError instead and are never caught as user errors.
"""


class DomainException(Exception):
    """Base class for all caller-correctable errors."""


class EntityNotFoundError(DomainException):
    """The referenced id has no live record."""


class InvalidOperationError(DomainException):
    """A payload or invariant was violated."""


class FatalStoreError(Exception):
    """The store cannot continue the current operation safely."""


class StorageError(FatalStoreError):
    """The durable backend failed to read or persist state."""


class CodecError(FatalStoreError):
    """A record could not be encoded within bounds or decoded."""


class QuantityOverflowError(FatalStoreError):
    """A stock increase would exceed the representable quantity."""


class IdentifierExhaustedError(FatalStoreError):
    """The identifier counter reached its maximum value."""
