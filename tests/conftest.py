"""Shared pytest fixtures for kakeibo tests."""

from datetime import date

import pytest

from kakeibo.database.memory import InMemoryTransactionRepository
from kakeibo.database.sqlalchemy_db import SQLAlchemyTransactionRepository
from kakeibo.domain.category import CategoryService
from kakeibo.domain.entities import Transaction, TransactionKind
from kakeibo.domain.transaction import TransactionService


@pytest.fixture
def memory_repo():
    """Create a fresh in-memory repository."""
    return InMemoryTransactionRepository()


@pytest.fixture
def sql_repo():
    """Create a repository over an in-memory SQLite database with seeded categories."""
    repo = SQLAlchemyTransactionRepository("sqlite://")
    repo.initialize_schema()

    yield repo

    repo.close()


@pytest.fixture(params=["memory", "sql"])
def repo(request):
    """Run a test against every repository backend."""
    return request.getfixturevalue(f"{request.param}_repo")


@pytest.fixture
def transaction_service(repo):
    """Create a TransactionService over the parametrized repository."""
    return TransactionService(repo)


@pytest.fixture
def category_service(repo):
    """Create a CategoryService over the parametrized repository."""
    return CategoryService(repo)


@pytest.fixture
def make_transaction():
    """Return a builder for unsaved transactions with sensible defaults."""

    def _make(**overrides) -> Transaction:
        fields = {
            "date": date(2025, 1, 15),
            "kind": TransactionKind.EXPENSE,
            "category_id": 1,
            "amount": -1000,
            "memo": "lunch",
        }
        fields.update(overrides)
        return Transaction(**fields)

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def database_url(tmp_path):
    """Return a URL for a file-backed SQLite database in a temp directory."""
    return f"sqlite:///{tmp_path / 'kakeibo.db'}"
