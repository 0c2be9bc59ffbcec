from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy import Engine, StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.bookstore.core.storage import LocalImageStorage
from src.bookstore.runtime.config.config_data import ConfigData


@pytest.fixture
def engine() -> Generator[Engine]:
    """A fresh in-memory SQLite engine with all catalog tables."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from src.bookstore.entities.service.book import BookTable  # noqa: F401
    from src.bookstore.entities.service.book_category import BookCategoryTable  # noqa: F401

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a fresh database session for testing."""
    with Session(engine) as session:
        try:
            yield session
        finally:
            session.rollback()
            session.close()


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    return tmp_path / "Books" / "Image"


@pytest.fixture
def image_storage(image_dir: Path) -> LocalImageStorage:
    return LocalImageStorage(image_dir)


@pytest.fixture
def test_config(image_dir: Path) -> ConfigData:
    """Configuration override for tests: in-memory database, temporary image dir."""
    config = ConfigData()
    config.app.environment = "test"
    config.database.url = "sqlite://"
    config.storage.image_dir = str(image_dir)
    return config
