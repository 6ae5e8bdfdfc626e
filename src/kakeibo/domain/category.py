"""Category domain service."""

from kakeibo.database.base import TransactionRepository
from kakeibo.domain.entities import Category


class CategoryService:
    """Read-only access to the category reference set."""

    def __init__(self, repository: TransactionRepository):
        """Initialize category service.

        Args:
            repository: TransactionRepository instance
        """
        self.repository = repository

    def list_categories(self) -> list[Category]:
        """List all categories ordered by ID."""
        return self.repository.find_all_categories()

    def get_category(self, category_id: int) -> Category:
        """Get category by ID.

        Raises:
            NotFoundError: If the category doesn't exist
        """
        return self.repository.find_category_by_id(category_id)
