"""Domain model entities for kakeibo.

These are pure data classes representing ledger concepts, independent of
the storage backend. Every entity is frozen, so a value handed out by a
repository can never alias the repository's own copy.
"""

from dataclasses import dataclass
from datetime import datetime, date
from enum import Enum
from typing import Optional


class TransactionKind(str, Enum):
    """Whether a transaction brings money in or takes it out."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Category:
    """Spending/income category domain entity."""

    id: int
    name: str


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    ``id`` and ``created_at`` are assigned by the repository on save and are
    None on a transaction that has not been stored yet. ``amount`` is in
    minor currency units: negative for expenses, positive for income.
    """

    date: date
    kind: TransactionKind
    category_id: int
    amount: int
    memo: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    category: Optional[Category] = None
