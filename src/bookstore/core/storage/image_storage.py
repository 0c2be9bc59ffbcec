"""Image storage interface and the local file-system implementation.

Cover images are keyed by their original file name. Writing a name that
already exists overwrites the previous file; no delete path is exposed.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path

from loguru import logger

from src.bookstore.runtime.context import get_config


class ImageStorage(ABC):
    """Abstract interface for cover image storage backends."""

    @abstractmethod
    async def save(self, filename: str, content: bytes) -> str:
        """Store an image, replacing any previous image of the same name.

        Args:
            filename: Original file name of the upload
            content: Raw image bytes

        Returns:
            The name the image is stored under
        """
        pass

    @abstractmethod
    def path_for(self, name: str) -> Path:
        """Resolve a stored image name to its location."""
        pass

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()


class LocalImageStorage(ImageStorage):
    """Stores images as plain files under a single root directory.

    The root is resolved to an absolute path and created once, when the
    storage is constructed.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).expanduser().resolve()
        self._root.mkdir(parents=True, exist_ok=True)
        logger.info("Image storage rooted at {}", self._root)

    @property
    def root(self) -> Path:
        return self._root

    async def save(self, filename: str, content: bytes) -> str:
        name = self._safe_name(filename)
        path = self._root / name
        await asyncio.to_thread(path.write_bytes, content)
        logger.debug("Stored image {} ({} bytes)", name, len(content))
        return name

    def path_for(self, name: str) -> Path:
        return self._root / self._safe_name(name)

    @staticmethod
    def _safe_name(filename: str) -> str:
        # Only the final path component is kept so uploads stay inside the root.
        name = Path(filename.replace("\\", "/")).name
        if not name or name in {".", ".."}:
            raise ValueError(f"Invalid image file name: {filename!r}")
        return name


def get_image_storage() -> ImageStorage:
    """Build the image storage configured for the current context."""
    return LocalImageStorage(get_config().storage.image_dir)
