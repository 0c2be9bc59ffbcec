"""Data-access layer for book categories."""

from datetime import datetime
from typing import Any

from sqlmodel import Session, select

from src.bookstore.entities.core._base import utc_now

from .entity import BookCategory
from .table import BookCategoryTable


class BookCategoryRepository:
    """Data-access layer for book categories.

    Writes are flushed but never committed; the calling service owns the
    transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, category_id: str, *, include_deleted: bool = False) -> BookCategory | None:
        statement = select(BookCategoryTable).where(BookCategoryTable.id == category_id)
        if not include_deleted:
            statement = statement.where(BookCategoryTable.deleted_at.is_(None))
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return BookCategory.model_validate(row.model_dump())

    def exists(self, category_id: str) -> bool:
        """Whether a category row exists at all, soft-deleted or not."""
        return self._session.get(BookCategoryTable, category_id) is not None

    def list_active(self) -> list[BookCategory]:
        statement = (
            select(BookCategoryTable)
            .where(BookCategoryTable.deleted_at.is_(None))
            .order_by(BookCategoryTable.name)
        )
        return [BookCategory.model_validate(row.model_dump()) for row in self._session.exec(statement)]

    def create(self, category: BookCategory) -> BookCategory:
        row = BookCategoryTable.model_validate(category.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return BookCategory.model_validate(row.model_dump())

    def update(self, category_id: str, changes: dict[str, Any]) -> BookCategory:
        row = self._get_row(category_id)
        for field, value in changes.items():
            setattr(row, field, value)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return BookCategory.model_validate(row.model_dump())

    def soft_delete(self, category_id: str, deleted_at: datetime | None = None) -> BookCategory:
        return self.update(category_id, {"deleted_at": deleted_at or utc_now()})

    def delete(self, category_id: str) -> BookCategory:
        row = self._get_row(category_id)
        category = BookCategory.model_validate(row.model_dump())
        self._session.delete(row)
        self._session.flush()
        return category

    def _get_row(self, category_id: str) -> BookCategoryTable:
        row = self._session.get(BookCategoryTable, category_id, populate_existing=True)
        if row is None:
            raise ValueError(f"Book category with id {category_id} not found")
        return row
