import uuid
from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Base entity with a UUID identifier, audit timestamps and a soft-delete marker."""

    id: str = PydanticField(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier for the entity",
    )

    created_at: datetime = PydanticField(default_factory=utc_now)
    updated_at: datetime = PydanticField(default_factory=utc_now)
    deleted_at: datetime | None = PydanticField(
        default=None, description="Soft-delete timestamp; None while the entity is active"
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class EntityTable(SQLModel, table=False):
    """Persistence base mirroring Entity; every catalog table soft-deletes."""

    id: str = Field(
        primary_key=True,
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(
        default_factory=utc_now,
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
    deleted_at: datetime | None = Field(default=None, index=True)
