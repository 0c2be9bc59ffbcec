"""Pydantic models for parsing the config.yaml configuration file.

The models mirror the ``config:`` section of config.yaml and handle
validation and type conversion of the loaded YAML data.
"""

from __future__ import annotations

import os
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, computed_field


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PATCH", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log file format")
    file: str | None = Field(default=None, description="Log file path; console only when unset")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of rotated log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./bookstore.db",
        description="Database connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    create_tables: bool = Field(
        default=True, description="Create missing tables when the application starts"
    )
    password_env_var: str | None = Field(
        default=None,
        description="Environment variable name containing the database password",
    )
    password_file: str | None = Field(
        default=None,
        description="Path to a file containing the database password",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def password(self) -> str | None:
        """Database password from the secrets file or environment variable, if configured."""
        if self.password_file:
            try:
                with open(self.password_file) as f:
                    return f.read().strip()
            except OSError as e:
                raise ValueError("Failed to read database password from file.") from e
        if self.password_env_var:
            password = os.getenv(self.password_env_var)
            if password is None:
                raise ValueError(f"Environment variable {self.password_env_var} not set")
            return password
        return None

    @computed_field
    @property
    def connection_string(self) -> str:
        """The URL with the resolved password filled in when the URL carries none."""
        from sqlalchemy.engine import make_url

        base_url = make_url(self.url)
        resolved_password = self.password

        if base_url.password:
            if resolved_password and resolved_password != base_url.password:
                logger.warning(
                    "Database password in the URL differs from the configured secret; using the secret."
                )
                base_url = base_url.set(password=resolved_password)
        elif resolved_password:
            base_url = base_url.set(password=resolved_password)

        return base_url.render_as_string(hide_password=False)


class StorageConfig(BaseModel):
    """Blob storage configuration for uploaded cover images."""

    image_dir: str = Field(
        default="Books/Image",
        description="Directory uploaded book images are written to",
    )


class CatalogConfig(BaseModel):
    """Limits applied by the catalog HTTP endpoints."""

    default_per_page: int = Field(default=10, ge=1, description="Page size when none is given")
    max_per_page: int = Field(default=100, ge=1, description="Largest accepted page size")


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )

    @property
    def base_url(self) -> str:
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{self.host}:{self.port}"


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(default_factory=AppConfig, description="Application configuration")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    storage: StorageConfig = Field(
        default_factory=StorageConfig, description="Image storage configuration"
    )
    catalog: CatalogConfig = Field(
        default_factory=CatalogConfig, description="Catalog endpoint limits"
    )
