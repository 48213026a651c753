# app/core/database_base.py

"""
Column factories for the record shape shared by every table
(id, created_at, updated_at, deleted_at).

Each table model declares these columns explicitly by calling the factories,
so the shape is composed into the model instead of inherited from an abstract
entity. Every call returns a fresh `Field`, which keeps SQLAlchemy from
attaching one Column object to two tables.
"""

from datetime import datetime, UTC
from typing import Any

from sqlalchemy import DateTime
from sqlalchemy.sql import func
from sqlmodel import Field


def utcnow() -> datetime:
    return datetime.now(UTC)


def id_field(description: str = "Primary key") -> Any:
    return Field(default=None, primary_key=True, description=description)


def created_at_field() -> Any:
    return Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"server_default": func.now()},
        description="Record creation time"
    )


def updated_at_field() -> Any:
    return Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"server_default": func.now(), "onupdate": utcnow},
        description="Record last update time"
    )


def deleted_at_field() -> Any:
    # NULL means the record is live; a timestamp marks it soft-deleted.
    return Field(
        default=None,
        sa_type=DateTime(timezone=True),
        index=True,
        description="Soft delete time"
    )


def not_deleted(model: Any) -> Any:
    """SQL condition selecting only live (not soft-deleted) rows of `model`."""
    return model.deleted_at.is_(None)
