"""Book API router with CRUD operations."""

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from src.bookstore.api.http.deps import get_book_service
from src.bookstore.core.models.catalog import (
    NO_CATEGORY,
    BookCount,
    BookCreate,
    BookFilter,
    BookPage,
    BookUpdate,
    ImageUpload,
    SortOrder,
)
from src.bookstore.core.services import BookService
from src.bookstore.entities.service.book import Book
from src.bookstore.runtime.context import get_config

router = APIRouter(prefix="/book", tags=["book"])


@router.get("", response_model=BookPage)
async def list_books(
    page: int = Query(default=1, ge=1),
    per_page: int | None = Query(default=None, alias="perPage", ge=1),
    filter_by: BookFilter = Query(default=BookFilter.NONE, alias="filter"),
    sort_order: SortOrder = Query(default=SortOrder.ASC, alias="sortOrder"),
    category_id: str = Query(default=NO_CATEGORY, alias="categoryId"),
    service: BookService = Depends(get_book_service),
) -> BookPage:
    """List active books, one page at a time."""
    catalog_config = get_config().catalog
    per_page = per_page or catalog_config.default_per_page
    if per_page > catalog_config.max_per_page:
        raise HTTPException(
            status_code=422,
            detail=f"perPage must not exceed {catalog_config.max_per_page}",
        )
    return await service.list_books(page, per_page, filter_by, sort_order, category_id)


@router.get("/count", response_model=BookCount)
async def count_books(service: BookService = Depends(get_book_service)) -> BookCount:
    """Count active books."""
    return BookCount(count=await service.count_books())


@router.get("/{book_id}", response_model=Book)
async def get_book(book_id: str, service: BookService = Depends(get_book_service)) -> Book:
    """Get an active book by ID."""
    return await service.get_book(book_id)


@router.post("", response_model=Book)
async def create_book(
    title: str = Form(...),
    author: str = Form(...),
    main_category_id: str = Form(..., alias="categoryId"),
    sub_category_id: str | None = Form(default=None, alias="subCategoryId"),
    final_price: float | None = Form(default=None, alias="finalPrice"),
    image: UploadFile | None = File(default=None),
    service: BookService = Depends(get_book_service),
) -> Book:
    """Create a book, optionally with a cover image."""
    try:
        data = BookCreate(
            title=title,
            author=author,
            main_category_id=main_category_id,
            sub_category_id=sub_category_id or None,
            final_price=final_price,
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e

    upload = None
    if image is not None and image.filename:
        upload = ImageUpload(filename=image.filename, content=await image.read())

    return await service.create_book(data, upload)


@router.patch("/{book_id}", response_model=Book)
async def update_book(
    book_id: str,
    book_update: BookUpdate,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Update the given fields of a book."""
    return await service.update_book(book_id, book_update)


@router.patch("/{book_id}/soft-delete", response_model=Book)
async def soft_delete_book(book_id: str, service: BookService = Depends(get_book_service)) -> Book:
    """Mark a book as deleted without removing it."""
    return await service.soft_delete_book(book_id)


@router.delete("/{book_id}", response_model=Book)
async def delete_book(book_id: str, service: BookService = Depends(get_book_service)) -> Book:
    """Permanently remove a book."""
    return await service.delete_book(book_id)
