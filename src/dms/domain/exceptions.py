"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and map each category to its
own exit status.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """The requested product quantity is not a positive integer."""

    def __init__(self, message: str = "Product quantity must be greater than 0.") -> None:
        super().__init__(message)


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """No product record exists for the given identifier."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Product with id '{product_id}' not found")


class RepositoryError(DomainException):
    """Stored data could not be read into domain objects."""
