"""Core services exports."""

# Catalog Services
from .catalog.book_category_service import BookCategoryService
from .catalog.book_service import BookService

# Database Service
from .database.db_session import DbSessionService

__all__ = [
    # Catalog Services
    "BookService",
    "BookCategoryService",
    # Database Service
    "DbSessionService",
]
