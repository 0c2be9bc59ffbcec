"""Blob storage for uploaded cover images."""

from .image_storage import ImageStorage, LocalImageStorage, get_image_storage

__all__ = ["ImageStorage", "LocalImageStorage", "get_image_storage"]
