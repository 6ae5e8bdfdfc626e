"""Tests for transaction domain service."""

import pytest
from datetime import date

from kakeibo.domain.entities import Category, TransactionKind
from kakeibo.domain.errors import NotFoundError, ValidationError
from kakeibo.domain.transaction import normalize_amount, parse_kind


class TestNormalizeAmount:
    """Tests for the sign convention."""

    @pytest.mark.parametrize(
        "kind,amount,expected",
        [
            (TransactionKind.EXPENSE, 1500, -1500),
            (TransactionKind.EXPENSE, -1500, -1500),
            (TransactionKind.INCOME, -250000, 250000),
            (TransactionKind.INCOME, 250000, 250000),
            (TransactionKind.EXPENSE, 0, 0),
        ],
    )
    def test_normalize_amount(self, kind, amount, expected):
        """Test that expenses end up negative and income positive."""
        assert normalize_amount(kind, amount) == expected


class TestParseKind:
    """Tests for parsing the transaction type."""

    def test_valid_kinds(self):
        """Test both accepted values."""
        assert parse_kind("income") is TransactionKind.INCOME
        assert parse_kind("expense") is TransactionKind.EXPENSE
        assert parse_kind(TransactionKind.EXPENSE) is TransactionKind.EXPENSE

    @pytest.mark.parametrize("value", ["", "transfer", "Income", "EXPENSE"])
    def test_invalid_kind(self, value):
        """Test that anything else is a validation error."""
        with pytest.raises(ValidationError, match="must be 'income' or 'expense'"):
            parse_kind(value)


class TestTransactionService:
    """Tests for TransactionService."""

    def test_create_expense_normalizes_sign(self, transaction_service):
        """Test that a positive expense amount is stored negative."""
        txn = transaction_service.create_transaction(
            txn_date="2025-01-15",
            kind="expense",
            category_id=1,
            amount=1500,
            memo="lunch",
        )

        assert txn.id == 1
        assert txn.amount == -1500
        assert txn.date == date(2025, 1, 15)
        assert txn.category == Category(id=1, name="Food")
        assert transaction_service.get_transaction(txn.id).amount == -1500

    def test_create_income_normalizes_sign(self, transaction_service):
        """Test that a negative income amount is stored positive."""
        txn = transaction_service.create_transaction(
            txn_date=date(2025, 1, 25), kind="income", category_id=10, amount=-250000
        )

        assert txn.amount == 250000
        assert txn.memo == ""

    @pytest.mark.parametrize("bad_date", ["2025/01/15", "15-01-2025", "2025-02-30", "", "today"])
    def test_invalid_date_is_validation_error(self, transaction_service, bad_date):
        """Test that only YYYY-MM-DD strings are accepted."""
        with pytest.raises(ValidationError, match="YYYY-MM-DD"):
            transaction_service.create_transaction(
                txn_date=bad_date, kind="expense", category_id=1, amount=100
            )

        assert transaction_service.list_transactions() == []

    def test_invalid_kind_is_checked_before_repository(self, transaction_service):
        """Test that a bad type fails even when the category is also bad."""
        with pytest.raises(ValidationError):
            transaction_service.create_transaction(
                txn_date="2025-01-15", kind="gift", category_id=999, amount=100
            )

    def test_unknown_category_is_not_found(self, transaction_service):
        """Test that a missing category is reported as not found."""
        with pytest.raises(NotFoundError, match="Category 999 not found"):
            transaction_service.create_transaction(
                txn_date="2025-01-15", kind="expense", category_id=999, amount=100
            )

    def test_update_transaction(self, transaction_service):
        """Test replacing a transaction keeps its creation time."""
        created = transaction_service.create_transaction(
            txn_date="2025-01-15", kind="expense", category_id=1, amount=1000, memo="before"
        )

        updated = transaction_service.update_transaction(
            transaction_id=created.id,
            txn_date="2025-01-16",
            kind="expense",
            category_id=2,
            amount=1500,
            memo="after",
        )

        assert updated.id == created.id
        assert updated.amount == -1500
        assert updated.memo == "after"
        assert updated.category == Category(id=2, name="Transportation")
        assert updated.created_at == created.created_at

    def test_update_unknown_transaction(self, transaction_service):
        """Test updating a missing transaction."""
        with pytest.raises(NotFoundError, match="Transaction 5 not found"):
            transaction_service.update_transaction(
                transaction_id=5, txn_date="2025-01-15", kind="income", category_id=10, amount=1
            )

    def test_delete_transaction(self, transaction_service):
        """Test deleting through the service."""
        created = transaction_service.create_transaction(
            txn_date="2025-01-15", kind="expense", category_id=1, amount=1000
        )

        transaction_service.delete_transaction(created.id)

        assert transaction_service.list_transactions() == []
        with pytest.raises(NotFoundError):
            transaction_service.delete_transaction(created.id)


class TestCategoryService:
    """Tests for CategoryService."""

    def test_list_categories(self, category_service):
        """Test listing the seeded categories."""
        categories = category_service.list_categories()

        assert len(categories) == 10
        assert categories[0].name == "Food"

    def test_get_category(self, category_service):
        """Test looking up one category."""
        assert category_service.get_category(10) == Category(id=10, name="Salary")
        with pytest.raises(NotFoundError):
            category_service.get_category(0)
