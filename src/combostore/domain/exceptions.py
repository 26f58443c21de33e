"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OrderAlreadyProcessedError(ValidationError):
    """Accept/reject was attempted on an order that is no longer pending."""

    def __init__(self, order_id: str, status: str) -> None:
        super().__init__("This order has already been processed.")
        self.order_id = order_id
        self.status = status


class PersistenceError(DomainException):
    """A backend rejected or failed to complete a write."""
