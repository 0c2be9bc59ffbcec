"""Book category API router."""

from fastapi import APIRouter, Depends

from src.bookstore.api.http.deps import get_book_category_service
from src.bookstore.core.models.catalog import BookCategoryCreate, BookCategoryUpdate
from src.bookstore.core.services import BookCategoryService
from src.bookstore.entities.service.book_category import BookCategory

router = APIRouter(prefix="/book-category", tags=["book-category"])


@router.get("/all", response_model=list[BookCategory])
async def list_book_categories(
    service: BookCategoryService = Depends(get_book_category_service),
) -> list[BookCategory]:
    return await service.list_categories()


@router.get("/{category_id}", response_model=BookCategory)
async def get_book_category(
    category_id: str,
    service: BookCategoryService = Depends(get_book_category_service),
) -> BookCategory:
    return await service.get_category(category_id)


@router.post("", response_model=BookCategory)
async def create_book_category(
    category: BookCategoryCreate,
    service: BookCategoryService = Depends(get_book_category_service),
) -> BookCategory:
    return await service.create_category(category)


@router.patch("/{category_id}", response_model=BookCategory)
async def update_book_category(
    category_id: str,
    category_update: BookCategoryUpdate,
    service: BookCategoryService = Depends(get_book_category_service),
) -> BookCategory:
    return await service.update_category(category_id, category_update)


@router.patch("/{category_id}/soft-delete", response_model=BookCategory)
async def soft_delete_book_category(
    category_id: str,
    service: BookCategoryService = Depends(get_book_category_service),
) -> BookCategory:
    return await service.soft_delete_category(category_id)


@router.delete("/{category_id}", response_model=BookCategory)
async def delete_book_category(
    category_id: str,
    service: BookCategoryService = Depends(get_book_category_service),
) -> BookCategory:
    return await service.delete_category(category_id)
