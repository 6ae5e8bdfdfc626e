"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, keeping the repository queries
free of entity construction details.
"""

from typing import Optional

from kakeibo.domain import entities as domain
from kakeibo.domain.errors import StoreError
from kakeibo.database.models import (
    Category as ORMCategory,
    Transaction as ORMTransaction,
)


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
    )


def transaction_to_domain(
    orm_transaction: ORMTransaction, orm_category: Optional[ORMCategory] = None
) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity.

    ``orm_category`` is the left-joined category row; it is None when the
    referenced category no longer exists, in which case the embedded category
    is left empty. A row whose type is neither income nor expense raises
    StoreError.
    """
    try:
        kind = domain.TransactionKind(orm_transaction.kind)
    except ValueError as e:
        raise StoreError(
            "decode", f"transaction {orm_transaction.id} has invalid type {orm_transaction.kind!r}"
        ) from e

    return domain.Transaction(
        id=orm_transaction.id,
        date=orm_transaction.date,
        kind=kind,
        category_id=orm_transaction.category_id,
        amount=orm_transaction.amount,
        memo=orm_transaction.memo or "",
        created_at=orm_transaction.created_at,
        category=category_to_domain(orm_category) if orm_category is not None else None,
    )


def transaction_to_values(transaction: domain.Transaction) -> dict:
    """Convert a domain Transaction to column values for insert/update."""
    return {
        ORMTransaction.date: transaction.date,
        ORMTransaction.kind: transaction.kind.value,
        ORMTransaction.category_id: transaction.category_id,
        ORMTransaction.amount: transaction.amount,
        ORMTransaction.memo: transaction.memo,
    }
