"""Catalog query/mutation service for books."""

import math

from loguru import logger
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import Session

from src.bookstore.core.errors import InternalServerError, NotFoundError
from src.bookstore.core.models.catalog import (
    NO_CATEGORY,
    BookCreate,
    BookFilter,
    BookPage,
    BookUpdate,
    ImageUpload,
    SortOrder,
)
from src.bookstore.core.storage.image_storage import ImageStorage
from src.bookstore.entities.service.book import Book, BookRepository, BookTable
from src.bookstore.entities.service.book_category import BookCategoryRepository

# Largest OFFSET a 64-bit signed SQL integer can hold.
_MAX_OFFSET = 2**63 - 1

_SORT_COLUMNS = {
    BookFilter.NAME: BookTable.title,
    BookFilter.PRICE: BookTable.final_price,
    BookFilter.CATEGORY: BookTable.main_category_id,
}


def _order_by(filter_by: BookFilter, sort_order: SortOrder) -> ColumnElement | None:
    column = _SORT_COLUMNS.get(filter_by)
    if column is None:
        return None
    return column.desc() if sort_order == SortOrder.DESC else column.asc()


class BookService:
    """Reads and writes books on behalf of the HTTP layer.

    Every operation is a single unit of work on the injected session. Store
    failures are logged and surfaced as ``InternalServerError`` with a fixed
    message; ``NotFoundError`` is only raised where a missing row is a
    meaningful answer (lookup, empty page, unknown category on create).
    """

    def __init__(self, db_session: Session, image_storage: ImageStorage):
        self._db_session = db_session
        self._books = BookRepository(db_session)
        self._categories = BookCategoryRepository(db_session)
        self._image_storage = image_storage

    async def get_book(self, book_id: str) -> Book:
        """Fetch one active book with its main and sub category."""
        try:
            book = self._books.get(book_id)
        except Exception as e:
            logger.error("Error fetching book {}: {}", book_id, e)
            raise InternalServerError("An error occurred while fetching book.") from e

        if book is None:
            raise NotFoundError("Book not found")

        return book

    async def list_books(
        self,
        page: int,
        per_page: int,
        filter_by: BookFilter = BookFilter.NONE,
        sort_order: SortOrder = SortOrder.ASC,
        category_id: str = NO_CATEGORY,
    ) -> BookPage:
        """Return one page of active books.

        An empty page is reported as ``NotFoundError``, page 1 of an empty
        catalog included. ``total_count`` covers all active books, whatever
        ``category_id`` narrowed the page to.
        """
        offset = (page - 1) * per_page
        if offset > _MAX_OFFSET:
            raise NotFoundError("No book was found")

        try:
            books = self._books.list_page(
                skip=offset,
                take=per_page,
                category_id=None if category_id == NO_CATEGORY else category_id,
                order_by=_order_by(filter_by, sort_order),
            )
        except Exception as e:
            logger.error("Error fetching books: {}", e)
            raise InternalServerError("An error occurred while fetching books.") from e

        if not books:
            raise NotFoundError("No book was found")

        try:
            total_count = self._books.count()
        except Exception as e:
            logger.error("Error while counting books: {}", e)
            raise InternalServerError("Error while counting books.") from e

        return BookPage(
            items=books,
            total_count=total_count,
            total_pages=math.ceil(total_count / per_page),
        )

    async def create_book(self, data: BookCreate, image: ImageUpload | None = None) -> Book:
        """Create a book after checking that its categories exist.

        Soft-deleted categories still count as existing. The cover image, when
        given, is stored under its original file name and replaces any image
        already stored under that name.
        """
        try:
            if not self._categories.exists(data.main_category_id):
                raise NotFoundError(f"Main category with ID {data.main_category_id} not found")

            if data.sub_category_id and not self._categories.exists(data.sub_category_id):
                raise NotFoundError(f"Sub category with ID {data.sub_category_id} not found")

            image_name = None
            if image is not None:
                image_name = await self._image_storage.save(image.filename, image.content)

            book = self._books.create(
                Book(
                    title=data.title,
                    author=data.author,
                    image=image_name,
                    final_price=data.final_price,
                    main_category_id=data.main_category_id,
                    sub_category_id=data.sub_category_id or None,
                )
            )
            self._db_session.commit()
            logger.info("Created book {} in category {}", book.id, book.main_category_id)
            return book
        except NotFoundError:
            raise
        except Exception as e:
            self._db_session.rollback()
            logger.error("Error creating a new book: {}", e)
            raise InternalServerError("Failed to create a new book") from e

    async def update_book(self, book_id: str, data: BookUpdate) -> Book:
        """Apply the explicitly set fields of ``data``.

        There is no existence pre-check and category references are not
        re-validated; a missing row fails like any other store error.
        """
        try:
            book = self._books.update(book_id, data.model_dump(exclude_unset=True))
            self._db_session.commit()
            return book
        except Exception as e:
            self._db_session.rollback()
            logger.error("Error while updating book {}: {}", book_id, e)
            raise InternalServerError("Failed to update a book") from e

    async def soft_delete_book(self, book_id: str) -> Book:
        try:
            book = self._books.soft_delete(book_id)
            self._db_session.commit()
            logger.info("Soft-deleted book {}", book_id)
            return book
        except Exception as e:
            self._db_session.rollback()
            logger.error("Error soft-deleting book {}: {}", book_id, e)
            raise InternalServerError("Failed to soft-delete a book") from e

    async def delete_book(self, book_id: str) -> Book:
        try:
            book = self._books.delete(book_id)
            self._db_session.commit()
            logger.info("Hard-deleted book {}", book_id)
            return book
        except Exception as e:
            self._db_session.rollback()
            logger.error("Error hard-deleting book {}: {}", book_id, e)
            raise InternalServerError("Failed to hard-delete a book") from e

    async def count_books(self) -> int:
        """Number of active books."""
        try:
            return self._books.count()
        except Exception as e:
            logger.error("Error counting books: {}", e)
            raise InternalServerError("An error occurred while counting books.") from e
