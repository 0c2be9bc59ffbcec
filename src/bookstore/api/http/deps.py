"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.core.services import BookCategoryService, BookService
from src.bookstore.core.storage import ImageStorage


def get_session(request: Request) -> Iterator[Session]:
    """Yield a database session for the duration of one request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_image_storage(request: Request) -> ImageStorage:
    """Get the image storage instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.image_storage


def get_book_service(
    session: Session = Depends(get_session),
    image_storage: ImageStorage = Depends(get_image_storage),
) -> BookService:
    return BookService(session, image_storage)


def get_book_category_service(
    session: Session = Depends(get_session),
) -> BookCategoryService:
    return BookCategoryService(session)
