"""Category lifecycle service; the book write path without cross-reference checks."""

from loguru import logger
from sqlmodel import Session

from src.bookstore.core.errors import InternalServerError, NotFoundError
from src.bookstore.core.models.catalog import BookCategoryCreate, BookCategoryUpdate
from src.bookstore.entities.service.book_category import BookCategory, BookCategoryRepository


class BookCategoryService:
    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._categories = BookCategoryRepository(db_session)

    async def list_categories(self) -> list[BookCategory]:
        """All active categories ordered by name. An empty catalog is not an error."""
        try:
            return self._categories.list_active()
        except Exception as e:
            logger.error("Error fetching book categories: {}", e)
            raise InternalServerError("An error occurred while fetching book categories.") from e

    async def get_category(self, category_id: str) -> BookCategory:
        try:
            category = self._categories.get(category_id)
        except Exception as e:
            logger.error("Error fetching book category {}: {}", category_id, e)
            raise InternalServerError("An error occurred while fetching book category.") from e

        if category is None:
            raise NotFoundError("Book category not found")
        return category

    async def create_category(self, data: BookCategoryCreate) -> BookCategory:
        try:
            category = self._categories.create(BookCategory(name=data.name))
            self._db_session.commit()
            logger.info("Created book category {} ({})", category.id, category.name)
            return category
        except Exception as e:
            self._db_session.rollback()
            logger.error("Error creating a new book category: {}", e)
            raise InternalServerError("Failed to create a new book category") from e

    async def update_category(self, category_id: str, data: BookCategoryUpdate) -> BookCategory:
        try:
            category = self._categories.update(category_id, data.model_dump(exclude_unset=True))
            self._db_session.commit()
            return category
        except Exception as e:
            self._db_session.rollback()
            logger.error("Error while updating book category {}: {}", category_id, e)
            raise InternalServerError("Failed to update a book category") from e

    async def soft_delete_category(self, category_id: str) -> BookCategory:
        # Books filed under the category keep pointing at it.
        try:
            category = self._categories.soft_delete(category_id)
            self._db_session.commit()
            return category
        except Exception as e:
            self._db_session.rollback()
            logger.error("Error soft-deleting book category {}: {}", category_id, e)
            raise InternalServerError("Failed to soft-delete a book category") from e

    async def delete_category(self, category_id: str) -> BookCategory:
        try:
            category = self._categories.delete(category_id)
            self._db_session.commit()
            return category
        except Exception as e:
            self._db_session.rollback()
            logger.error("Error hard-deleting book category {}: {}", category_id, e)
            raise InternalServerError("Failed to hard-delete a book category") from e
