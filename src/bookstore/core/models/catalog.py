"""Request and response models for the catalog services."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from src.bookstore.entities.service.book.entity import Book

NO_CATEGORY = "none"


class BookFilter(StrEnum):
    """Field a book listing is sorted by."""

    NONE = "none"
    NAME = "name"
    PRICE = "price"
    CATEGORY = "category"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class BookCreate(BaseModel):
    """Fields accepted when creating a book."""

    title: str = Field(min_length=1, description="Book title")
    author: str = Field(min_length=1, description="Book author")
    main_category_id: str = Field(description="Existing category the book is filed under")
    sub_category_id: str | None = Field(default=None, description="Optional secondary category")
    final_price: float | None = Field(default=None, ge=0, description="Final selling price")


class BookUpdate(BaseModel):
    """Partial patch for a book; only explicitly set fields are applied.

    Accepts the same camelCase names as the create form as well as the
    field names.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str | None = None
    author: str | None = None
    image: str | None = None
    final_price: float | None = Field(default=None, ge=0, alias="finalPrice")
    main_category_id: str | None = Field(default=None, alias="categoryId")
    sub_category_id: str | None = Field(default=None, alias="subCategoryId")


class ImageUpload(BaseModel):
    """An uploaded cover image: original file name plus its bytes."""

    filename: str
    content: bytes


class BookPage(BaseModel):
    """One page of a book listing.

    ``total_count`` counts every active book, independent of any category
    filter applied to ``items``.
    """

    items: list[Book]
    total_count: int
    total_pages: int


class BookCount(BaseModel):
    count: int


class BookCategoryCreate(BaseModel):
    name: str = Field(min_length=1, description="Category name")


class BookCategoryUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1)
