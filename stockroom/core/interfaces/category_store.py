"""Abstract interfaces for category storage and resolution."""

from abc import ABC, abstractmethod

from stockroom.core.entities.category import Category


class ICategoryStore(ABC):
    """Interface for category persistence."""

    @abstractmethod
    async def create_category(self, category: Category) -> Category:
        """Create a new category. Raises CategoryAlreadyExistsError on duplicates."""
        pass

    @abstractmethod
    async def get_category(self, name: str) -> Category | None:
        """Get category by exact name."""
        pass

    @abstractmethod
    async def exists(self, name: str) -> bool:
        """Check whether a category with this exact name exists."""
        pass

    @abstractmethod
    async def list_categories(self) -> list[Category]:
        """List all categories ordered by name."""
        pass


class ICategoryResolver(ABC):
    """Narrow capability for turning a category name into a Category."""

    @abstractmethod
    async def resolve_category_by_name(self, name: str) -> Category:
        """Resolve category. Raises CategoryNotFoundError when absent."""
        pass
