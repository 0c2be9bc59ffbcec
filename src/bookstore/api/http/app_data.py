from dataclasses import dataclass

from src.bookstore.core.services import DbSessionService
from src.bookstore.core.storage import ImageStorage


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    image_storage: ImageStorage
