"""Transaction domain service."""

from dataclasses import replace
from datetime import date
from typing import Union

from kakeibo.database.base import TransactionRepository
from kakeibo.domain.entities import Transaction, TransactionKind
from kakeibo.domain.errors import ValidationError, invalid_date, invalid_kind
from kakeibo.utils.date_parser import parse_iso_date


def parse_kind(value: Union[str, TransactionKind]) -> TransactionKind:
    """Parse a transaction type string.

    Raises:
        ValidationError: If the value is not 'income' or 'expense'
    """
    if isinstance(value, TransactionKind):
        return value
    try:
        return TransactionKind(value)
    except ValueError:
        raise ValidationError(invalid_kind(value))


def normalize_amount(kind: TransactionKind, amount: int) -> int:
    """Apply the sign convention: expenses negative, income positive."""
    if kind is TransactionKind.EXPENSE:
        return -abs(amount)
    return abs(amount)


class TransactionService:
    """Service for managing transactions.

    This is the boundary between raw input and the repository: it validates
    the type and date, normalizes the amount sign exactly once and resolves
    the category before handing a finished entity to the repository.
    """

    def __init__(self, repository: TransactionRepository):
        """Initialize transaction service.

        Args:
            repository: TransactionRepository instance
        """
        self.repository = repository

    def build_transaction(
        self,
        txn_date: Union[date, str],
        kind: Union[str, TransactionKind],
        category_id: int,
        amount: int,
        memo: str = "",
    ) -> Transaction:
        """Validate raw input and construct an unsaved transaction.

        Args:
            txn_date: Transaction date, or a string in YYYY-MM-DD form
            kind: 'income' or 'expense'
            category_id: Category ID
            amount: Amount in minor units; the sign is normalized by kind
            memo: Free-text memo

        Returns:
            Transaction entity with the embedded category set

        Raises:
            ValidationError: If the type or date is invalid
            NotFoundError: If the category doesn't exist
        """
        txn_kind = parse_kind(kind)
        if isinstance(txn_date, str):
            try:
                txn_date = parse_iso_date(txn_date)
            except ValueError:
                raise ValidationError(invalid_date(txn_date))

        category = self.repository.find_category_by_id(category_id)
        return Transaction(
            date=txn_date,
            kind=txn_kind,
            category_id=category.id,
            amount=normalize_amount(txn_kind, amount),
            memo=memo or "",
            category=category,
        )

    def create_transaction(
        self,
        txn_date: Union[date, str],
        kind: Union[str, TransactionKind],
        category_id: int,
        amount: int,
        memo: str = "",
    ) -> Transaction:
        """Create a transaction.

        Returns:
            The stored transaction with id and created_at assigned

        Raises:
            ValidationError: If the type or date is invalid
            NotFoundError: If the category doesn't exist
            StoreError: If the repository fails
        """
        transaction = self.build_transaction(txn_date, kind, category_id, amount, memo)
        return self.repository.save(transaction)

    def update_transaction(
        self,
        transaction_id: int,
        txn_date: Union[date, str],
        kind: Union[str, TransactionKind],
        category_id: int,
        amount: int,
        memo: str = "",
    ) -> Transaction:
        """Replace every field of a transaction.

        Returns:
            The stored transaction; created_at is unchanged

        Raises:
            ValidationError: If the type or date is invalid
            NotFoundError: If the transaction or category doesn't exist
            StoreError: If the repository fails
        """
        transaction = self.build_transaction(txn_date, kind, category_id, amount, memo)
        return self.repository.update(replace(transaction, id=transaction_id))

    def get_transaction(self, transaction_id: int) -> Transaction:
        """Get transaction by ID.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        return self.repository.find_by_id(transaction_id)

    def list_transactions(self) -> list[Transaction]:
        """List all transactions."""
        return self.repository.find_all()

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        self.repository.delete(transaction_id)
