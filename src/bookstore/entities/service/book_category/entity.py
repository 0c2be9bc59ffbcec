"""Entity: BookCategory."""

from typing import Any

from pydantic import Field

from src.bookstore.entities.core._base import Entity


class BookCategory(Entity):
    """Category a book can be filed under, either as main or as sub category."""

    name: str = Field(description="Display name of the category")

    def __eq__(self, other: Any) -> bool:
        """Compare categories by business attributes, ignoring timestamps."""
        if not isinstance(other, BookCategory):
            return False

        return self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.id, self.name))
