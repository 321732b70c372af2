"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


def product_not_found(code: str) -> str:
    """Return message for missing product."""
    return f"Product {code} does not exist"


def duplicate_product_code(code: str) -> str:
    """Return message for a product code already in use."""
    return f"Product code '{code}' already exists"


def duplicate_supplier_id(supplier_id: int) -> str:
    """Return message for a supplier id already in use."""
    return f"Supplier with id {supplier_id} already exists"


def customer_not_found(name: str) -> str:
    """Return message for missing customer."""
    return f"Customer '{name}' does not exist"


def seller_not_found(name: str) -> str:
    """Return message for missing seller."""
    return f"Seller '{name}' does not exist"


def sale_not_found(number: int) -> str:
    """Return message for missing sale."""
    return f"Sale {number} does not exist"
