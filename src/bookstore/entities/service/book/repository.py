"""Data-access layer for books."""

from datetime import datetime
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import selectinload
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import Session, select

from src.bookstore.entities.core._base import utc_now
from src.bookstore.entities.service.book_category.entity import BookCategory

from .entity import Book
from .table import BookTable


def _to_entity(
    row: BookTable, *, with_main_category: bool = False, with_sub_category: bool = False
) -> Book:
    book = Book.model_validate(row.model_dump())
    if with_main_category and row.main_category is not None:
        book.main_category = BookCategory.model_validate(row.main_category.model_dump())
    if with_sub_category and row.sub_category is not None:
        book.sub_category = BookCategory.model_validate(row.sub_category.model_dump())
    return book


class BookRepository:
    """Data-access layer for books.

    Read methods only ever see active rows (``deleted_at IS NULL``); the
    write methods address rows by id whatever their soft-delete state.
    Nothing is committed here.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, book_id: str) -> Book | None:
        """Fetch one active book with both categories loaded."""
        statement = (
            select(BookTable)
            .where(BookTable.id == book_id, BookTable.deleted_at.is_(None))
            .options(
                selectinload(BookTable.main_category),
                selectinload(BookTable.sub_category),
            )
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return _to_entity(row, with_main_category=True, with_sub_category=True)

    def list_page(
        self,
        *,
        skip: int,
        take: int,
        category_id: str | None = None,
        order_by: ColumnElement | None = None,
    ) -> list[Book]:
        """One page of active books with their main category loaded."""
        statement = (
            select(BookTable)
            .where(BookTable.deleted_at.is_(None))
            .options(selectinload(BookTable.main_category))
        )
        if category_id is not None:
            statement = statement.where(BookTable.main_category_id == category_id)
        if order_by is not None:
            statement = statement.order_by(order_by)
        statement = statement.offset(skip).limit(take)

        return [_to_entity(row, with_main_category=True) for row in self._session.exec(statement)]

    def count(self) -> int:
        statement = select(func.count()).select_from(BookTable).where(BookTable.deleted_at.is_(None))
        return self._session.exec(statement).one()

    def create(self, book: Book) -> Book:
        row = BookTable.model_validate(book.model_dump(exclude={"main_category", "sub_category"}))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return _to_entity(row)

    def update(self, book_id: str, changes: dict[str, Any]) -> Book:
        row = self._get_row(book_id)
        for field, value in changes.items():
            setattr(row, field, value)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return _to_entity(row)

    def soft_delete(self, book_id: str, deleted_at: datetime | None = None) -> Book:
        return self.update(book_id, {"deleted_at": deleted_at or utc_now()})

    def delete(self, book_id: str) -> Book:
        row = self._get_row(book_id)
        book = _to_entity(row)
        self._session.delete(row)
        self._session.flush()
        return book

    def _get_row(self, book_id: str) -> BookTable:
        row = self._session.get(BookTable, book_id, populate_existing=True)
        if row is None:
            raise ValueError(f"Book with id {book_id} not found")
        return row
