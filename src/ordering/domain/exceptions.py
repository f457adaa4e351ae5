"""Domain-level exceptions.

Operations that cannot proceed at all raise a subclass of DomainException
so the CLI layer can catch them uniformly and display user-friendly
messages.  Semantic problems with an entity that *can* be built are
reported through its notification ledger instead.
"""

from __future__ import annotations

from collections.abc import Iterable


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated.

    ``notifications`` carries the ledger messages when the failure comes
    from an entity that validated itself as invalid.
    """

    def __init__(self, message: str, notifications: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.notifications: list[str] = list(notifications)


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidOperationError(DomainException):
    """The entity exists but the requested operation is not allowed."""
