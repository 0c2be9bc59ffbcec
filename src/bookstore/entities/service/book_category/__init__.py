"""Entity package: BookCategory."""

from .entity import BookCategory
from .repository import BookCategoryRepository
from .table import BookCategoryTable

__all__ = ["BookCategory", "BookCategoryRepository", "BookCategoryTable"]
