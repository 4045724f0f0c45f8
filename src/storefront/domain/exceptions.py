"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors.

    ``identifier`` names the offending entity (color id, order number, ...)
    when there is one, so callers can point the user at it.
    """

    def __init__(self, message: str, identifier: str | None = None) -> None:
        super().__init__(message)
        self.identifier = identifier


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(DomainException):
    """The requested quantity exceeds what is left in a stock bucket."""

    def __init__(
        self,
        product_title: str,
        available: int,
        requested: int,
        identifier: str | None = None,
    ) -> None:
        super().__init__(
            f"Insufficient stock for {product_title} "
            f"(requested {requested}, {available} available)",
            identifier,
        )
        self.product_title = product_title
        self.available = available
        self.requested = requested


class PersistenceError(DomainException):
    """The store could not be written; the unit of work was not committed."""
