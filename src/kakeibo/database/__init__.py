"""Storage layer for kakeibo application."""

from kakeibo.database.base import TransactionRepository
from kakeibo.database.factories import create_repository

__all__ = ["TransactionRepository", "create_repository"]
