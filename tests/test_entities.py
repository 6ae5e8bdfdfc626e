"""Tests for domain entities."""

import pytest
from dataclasses import FrozenInstanceError, replace
from datetime import date

from kakeibo.domain.entities import Category, Transaction, TransactionKind


class TestTransactionKind:
    """Tests for TransactionKind."""

    def test_values(self):
        """Test the string values of the two kinds."""
        assert TransactionKind("income") is TransactionKind.INCOME
        assert TransactionKind("expense") is TransactionKind.EXPENSE
        assert TransactionKind.EXPENSE == "expense"

    def test_unknown_value(self):
        """Test that other values are not representable."""
        with pytest.raises(ValueError):
            TransactionKind("transfer")


class TestTransaction:
    """Tests for the Transaction entity."""

    def test_new_transaction_has_no_identity(self):
        """Test the defaults of an unsaved transaction."""
        txn = Transaction(
            date=date(2025, 1, 15),
            kind=TransactionKind.EXPENSE,
            category_id=1,
            amount=-1500,
        )

        assert txn.id is None
        assert txn.created_at is None
        assert txn.category is None
        assert txn.memo == ""

    def test_is_frozen(self):
        """Test that entities cannot be mutated."""
        txn = Transaction(
            date=date(2025, 1, 15),
            kind=TransactionKind.EXPENSE,
            category_id=1,
            amount=-1500,
        )

        with pytest.raises(FrozenInstanceError):
            txn.memo = "changed"

    def test_value_equality(self):
        """Test that entities compare by value."""
        category = Category(id=1, name="Food")
        txn = Transaction(
            date=date(2025, 1, 15),
            kind=TransactionKind.EXPENSE,
            category_id=1,
            amount=-1500,
            category=category,
        )

        assert txn == replace(txn)
        assert txn != replace(txn, amount=-1000)
        assert Category(id=1, name="Food") == category
