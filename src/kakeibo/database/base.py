"""Abstract transaction repository interface."""

from abc import ABC, abstractmethod

from kakeibo.domain.entities import Category, Transaction


class TransactionRepository(ABC):
    """Persistence contract shared by every storage backend.

    All backends raise the same error kinds for the same situation:
    ``NotFoundError`` when an id does not resolve and ``StoreError`` when the
    underlying storage fails. Returned entities are values; holding on to one
    never exposes the backend's internal state.
    """

    @abstractmethod
    def find_all(self) -> list[Transaction]:
        """List all transactions in the backend's native order."""
        pass

    @abstractmethod
    def find_by_id(self, transaction_id: int) -> Transaction:
        """Get transaction by ID. Raises NotFoundError if missing."""
        pass

    @abstractmethod
    def find_all_categories(self) -> list[Category]:
        """List all categories ordered by ID."""
        pass

    @abstractmethod
    def find_category_by_id(self, category_id: int) -> Category:
        """Get category by ID. Raises NotFoundError if missing."""
        pass

    @abstractmethod
    def save(self, transaction: Transaction) -> Transaction:
        """Store a new transaction.

        Returns the stored transaction with ``id``, ``created_at`` and the
        embedded category populated. Raises NotFoundError if the category
        reference does not resolve.
        """
        pass

    @abstractmethod
    def update(self, transaction: Transaction) -> Transaction:
        """Replace every field of transaction ``transaction.id``.

        ``created_at`` is kept from the stored record. Returns the stored
        transaction. Raises NotFoundError if the id or the category reference
        does not resolve.
        """
        pass

    @abstractmethod
    def delete(self, transaction_id: int) -> None:
        """Remove a transaction. Raises NotFoundError if missing."""
        pass

    def close(self) -> None:
        """Release any resources held by the backend."""
        pass
