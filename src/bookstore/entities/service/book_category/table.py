"""BookCategory database table model."""

from sqlmodel import Field

from src.bookstore.entities.core._base import EntityTable


class BookCategoryTable(EntityTable, table=True):
    """Database persistence model for book categories.

    Books reference this table twice (main and sub category). Nothing here
    cascades to books when a category is soft- or hard-deleted.
    """

    __tablename__ = "book_category"

    name: str = Field(index=True)
