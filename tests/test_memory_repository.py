"""Tests for the in-memory repository."""

import threading
from datetime import date

from kakeibo.database.memory import InMemoryTransactionRepository
from kakeibo.domain.entities import Category


class TestInMemoryTransactionRepository:
    """Tests specific to the in-memory backend."""

    def test_seeds_ten_categories(self, memory_repo):
        """Test the pre-seeded category names."""
        categories = memory_repo.find_all_categories()

        assert len(categories) == 10
        assert categories[0] == Category(id=1, name="Food")
        assert categories[-1] == Category(id=10, name="Salary")

    def test_find_all_returns_insertion_order(self, memory_repo, make_transaction):
        """Test that transactions are listed in the order they were saved."""
        memory_repo.save(make_transaction(date=date(2025, 3, 1), memo="march"))
        memory_repo.save(make_transaction(date=date(2025, 1, 1), memo="january"))
        memory_repo.save(make_transaction(date=date(2025, 2, 1), memo="february"))

        assert [txn.memo for txn in memory_repo.find_all()] == ["march", "january", "february"]

    def test_update_keeps_position(self, memory_repo, make_transaction):
        """Test that an updated transaction stays in its original slot."""
        first = memory_repo.save(make_transaction(memo="a"))
        memory_repo.save(make_transaction(memo="b"))

        memory_repo.update(make_transaction(id=first.id, memo="a2"))

        assert [txn.memo for txn in memory_repo.find_all()] == ["a2", "b"]

    def test_delete_compacts(self, memory_repo, make_transaction):
        """Test that deleting from the middle leaves no gap."""
        memory_repo.save(make_transaction(memo="a"))
        middle = memory_repo.save(make_transaction(memo="b"))
        memory_repo.save(make_transaction(memo="c"))

        memory_repo.delete(middle.id)

        assert [txn.memo for txn in memory_repo.find_all()] == ["a", "c"]

    def test_category_list_is_a_copy(self, memory_repo):
        """Test that mutating the returned category list does not touch the store."""
        memory_repo.find_all_categories().clear()

        assert len(memory_repo.find_all_categories()) == 10

    def test_separate_instances_do_not_share_state(self, make_transaction):
        """Test that each repository instance owns its own data."""
        first = InMemoryTransactionRepository()
        second = InMemoryTransactionRepository()

        first.save(make_transaction())

        assert len(first.find_all()) == 1
        assert second.find_all() == []

    def test_concurrent_saves_get_unique_ids(self, memory_repo, make_transaction):
        """Test that parallel saves never hand out the same ID."""
        saved_ids = []
        ids_lock = threading.Lock()

        def worker():
            for _ in range(50):
                txn = memory_repo.save(make_transaction())
                memory_repo.find_all()
                with ids_lock:
                    saved_ids.append(txn.id)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(saved_ids) == list(range(1, 401))
        assert len(memory_repo.find_all()) == 400
