"""Catalog request and response models."""

from .catalog import (
    NO_CATEGORY,
    BookCategoryCreate,
    BookCategoryUpdate,
    BookCount,
    BookCreate,
    BookFilter,
    BookPage,
    BookUpdate,
    ImageUpload,
    SortOrder,
)

__all__ = [
    "NO_CATEGORY",
    "BookCategoryCreate",
    "BookCategoryUpdate",
    "BookCount",
    "BookCreate",
    "BookFilter",
    "BookPage",
    "BookUpdate",
    "ImageUpload",
    "SortOrder",
]
