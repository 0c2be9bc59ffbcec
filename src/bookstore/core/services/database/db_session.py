"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlmodel import Session, SQLModel, create_engine

from src.bookstore.runtime.config.config_data import DatabaseConfig
from src.bookstore.runtime.context import get_config


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None):
        """Initialize the shared database engine from the current configuration."""
        main_config = get_config()
        db_config = db_config or main_config.database

        logger.info("Configuring database engine for environment: {}", main_config.app.environment)
        engine_kwargs = self._get_engine_kwargs(db_config)

        if db_config.is_sqlite and main_config.app.environment == "production":
            logger.warning(
                "SQLite is not recommended for production use. "
                "Consider PostgreSQL for better concurrency and reliability."
            )

        self._engine = create_engine(db_config.connection_string, **engine_kwargs)

    @staticmethod
    def _get_engine_kwargs(db_config: DatabaseConfig) -> dict[str, Any]:
        """Engine options per backend; SQLite engines get no pool sizing."""
        engine_kwargs: dict[str, Any] = {"echo": db_config.echo}

        if db_config.is_sqlite:
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,
                "timeout": 20,
            }
            # In-memory databases live inside one connection; share it.
            if db_config.url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_pre_ping": True,
            }
        )
        if "postgresql" in db_config.url:
            engine_kwargs["connect_args"] = {
                "application_name": "bookstore_api",
                "connect_timeout": 30,
            }
        return engine_kwargs

    @property
    def engine(self):
        return self._engine

    def create_all(self) -> None:
        """Create all catalog tables that do not exist yet."""
        from src.bookstore.entities.service.book import BookTable  # noqa: F401
        from src.bookstore.entities.service.book_category import BookCategoryTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Transactional scope: commit on success, roll back and re-raise on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}", type(e).__name__, e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error("Database health check failed: {}: {}", type(e).__name__, e)
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "type": type(pool).__name__,
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    def dispose(self) -> None:
        self._engine.dispose()
