"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested transaction or category does not exist."""


class StoreError(RuntimeError):
    """The storage backend failed (connectivity, driver or query error).

    Never raised for a missing record; that is always NotFoundError.
    """

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        super().__init__(f"{operation}: {message}" if message else operation)


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def invalid_kind(value: str) -> str:
    """Return message for a transaction type outside income/expense."""
    return f"Invalid type '{value}': must be 'income' or 'expense'"


def invalid_date(value: str) -> str:
    """Return message for a date not in YYYY-MM-DD form."""
    return f"Invalid date '{value}': must be in YYYY-MM-DD format"
