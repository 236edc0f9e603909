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


class IndexOutOfRangeError(EntityNotFoundError):
    """A bill line position does not exist."""


class InsufficientStockError(ValidationError):
    """The requested quantity exceeds what is on the shelf."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(requested {requested}, only {available} units available)"
        )
        self.product_name = product_name
        self.requested = requested
        self.available = available


class EmptyBillError(ValidationError):
    """Checkout was attempted with no items on the bill."""


class DuplicateBarcodeError(ValidationError):
    """Another product already uses this barcode."""


class PersistenceError(DomainException):
    """The storage backend failed; the operation was rolled back."""


class ConcurrentModificationError(PersistenceError):
    """The store changed underneath an open unit of work."""
