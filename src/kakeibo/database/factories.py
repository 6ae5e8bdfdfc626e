"""Repository factory functions for creating repository instances."""

import os
from typing import Optional

from kakeibo.database.base import TransactionRepository
from kakeibo.database.memory import InMemoryTransactionRepository
from kakeibo.database.sqlalchemy_db import SQLAlchemyTransactionRepository


def normalize_database_url(database_url: str) -> str:
    """Point bare PostgreSQL URLs at the psycopg driver.

    ``postgres://`` and ``postgresql://`` URLs (as handed out by most hosting
    providers) are rewritten to ``postgresql+psycopg://``. Other URLs are
    returned unchanged.
    """
    for prefix in ("postgres://", "postgresql://"):
        if database_url.startswith(prefix):
            return "postgresql+psycopg://" + database_url[len(prefix):]
    return database_url


def create_memory_repository() -> InMemoryTransactionRepository:
    """Create an in-memory repository seeded with the default categories."""
    return InMemoryTransactionRepository()


def create_sql_repository(database_url: str) -> SQLAlchemyTransactionRepository:
    """Create a relational repository.

    Raises:
        StoreError: If the database cannot be opened or does not answer a ping
    """
    return SQLAlchemyTransactionRepository(normalize_database_url(database_url))


def create_repository(database_url: Optional[str] = None) -> TransactionRepository:
    """Create the repository for this process.

    Args:
        database_url: Database URL. If None, checks the DATABASE_URL
            environment variable. An empty value selects the in-memory store.

    Returns:
        TransactionRepository instance
    """
    if database_url is None:
        database_url = os.environ.get("DATABASE_URL")

    if not database_url or not database_url.strip():
        return create_memory_repository()
    return create_sql_repository(database_url.strip())
