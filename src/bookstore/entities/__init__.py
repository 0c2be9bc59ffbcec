"""Entities grouped by business concept.

Each entity package holds:
- entity.py: domain model returned by services and routers
- table.py: SQLModel persistence model
- repository.py: data access over a SQLModel session
"""

from .service.book import Book, BookRepository, BookTable
from .service.book_category import BookCategory, BookCategoryRepository, BookCategoryTable

__all__ = [
    "Book",
    "BookTable",
    "BookRepository",
    "BookCategory",
    "BookCategoryTable",
    "BookCategoryRepository",
]
