"""Process-local transaction repository."""

from dataclasses import replace
from datetime import datetime, UTC

from kakeibo.database.base import TransactionRepository
from kakeibo.database.defaults import DEFAULT_CATEGORIES
from kakeibo.database.rwlock import ReadWriteLock
from kakeibo.domain.entities import Category, Transaction
from kakeibo.domain.errors import NotFoundError, category_not_found, transaction_not_found


class InMemoryTransactionRepository(TransactionRepository):
    """Thread-safe in-memory implementation of TransactionRepository.

    Transactions are kept in insertion order. One reader/writer lock guards
    the whole store: lookups share it, mutations take it exclusively. Ids come
    from a counter that starts at 1 and is never rewound, so an id freed by
    ``delete`` is not handed out again.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._transactions: list[Transaction] = []
        self._categories: list[Category] = [
            Category(id=category_id, name=name) for category_id, name in DEFAULT_CATEGORIES
        ]
        self._next_id = 1

    def find_all(self) -> list[Transaction]:
        """List all transactions in insertion order."""
        with self._lock.read():
            return list(self._transactions)

    def find_by_id(self, transaction_id: int) -> Transaction:
        """Get transaction by ID."""
        with self._lock.read():
            index = self._index_of(transaction_id)
            return self._transactions[index]

    def find_all_categories(self) -> list[Category]:
        """List all categories ordered by ID."""
        with self._lock.read():
            return sorted(self._categories, key=lambda category: category.id)

    def find_category_by_id(self, category_id: int) -> Category:
        """Get category by ID."""
        with self._lock.read():
            return self._category(category_id)

    def save(self, transaction: Transaction) -> Transaction:
        """Append a new transaction, assigning its id and creation time."""
        with self._lock.write():
            category = self._category(transaction.category_id)
            stored = replace(
                transaction,
                id=self._next_id,
                created_at=datetime.now(UTC),
                category=category,
            )
            self._next_id += 1
            self._transactions.append(stored)
            return stored

    def update(self, transaction: Transaction) -> Transaction:
        """Replace a transaction in place, keeping its creation time."""
        with self._lock.write():
            category = self._category(transaction.category_id)
            index = self._index_of(transaction.id)
            stored = replace(
                transaction,
                created_at=self._transactions[index].created_at,
                category=category,
            )
            self._transactions[index] = stored
            return stored

    def delete(self, transaction_id: int) -> None:
        """Remove a transaction."""
        with self._lock.write():
            index = self._index_of(transaction_id)
            del self._transactions[index]

    # Callers must hold the lock.
    def _index_of(self, transaction_id: int) -> int:
        for index, transaction in enumerate(self._transactions):
            if transaction.id == transaction_id:
                return index
        raise NotFoundError(transaction_not_found(transaction_id))

    def _category(self, category_id: int) -> Category:
        for category in self._categories:
            if category.id == category_id:
                return category
        raise NotFoundError(category_not_found(category_id))
