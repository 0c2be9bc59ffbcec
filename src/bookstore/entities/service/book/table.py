"""Book database table model."""

from typing import Optional

from sqlmodel import Field, Relationship

from src.bookstore.entities.core._base import EntityTable
from src.bookstore.entities.service.book_category.table import BookCategoryTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    Both category columns point at ``book_category``; existence is checked by
    the service before insert, not cascaded by the table.
    """

    __tablename__ = "book"

    title: str
    author: str
    image: str | None = None
    final_price: float | None = Field(default=None, index=True)
    main_category_id: str = Field(foreign_key="book_category.id", index=True)
    sub_category_id: str | None = Field(default=None, foreign_key="book_category.id")

    main_category: Optional[BookCategoryTable] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "[BookTable.main_category_id]"}
    )
    sub_category: Optional[BookCategoryTable] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "[BookTable.sub_category_id]"}
    )
