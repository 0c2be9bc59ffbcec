"""Entity: Book."""

from typing import Any

from pydantic import Field

from src.bookstore.entities.core._base import Entity
from src.bookstore.entities.service.book_category.entity import BookCategory


class Book(Entity):
    """Book entity representing a catalog item.

    ``main_category`` and ``sub_category`` are only populated when the
    repository was asked to include them; the ``*_id`` fields are always set.
    """

    title: str = Field(description="Book title")
    author: str = Field(description="Book author")
    image: str | None = Field(default=None, description="Stored cover image file name")
    final_price: float | None = Field(default=None, description="Final selling price")
    main_category_id: str = Field(description="Main category identifier")
    sub_category_id: str | None = Field(default=None, description="Sub category identifier")

    main_category: BookCategory | None = None
    sub_category: BookCategory | None = None

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps and loaded relations."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author == other.author
            and self.image == other.image
            and self.final_price == other.final_price
            and self.main_category_id == other.main_category_id
            and self.sub_category_id == other.sub_category_id
        )

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.title,
            self.author,
            self.image,
            self.final_price,
            self.main_category_id,
            self.sub_category_id,
        ))
