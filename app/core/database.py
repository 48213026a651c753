# app/core/database.py

"""
Database connection and session management.

- Creates the SQLAlchemy async engine used by SQLModel.
- Provides the per-request `get_session` dependency.
- Creates tables on startup for development setups.
"""

import logging
from typing import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings

# Every table model must be imported before metadata.create_all() runs.
from app.domains import models  # noqa: F401

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    # SQLite (tests, local runs) does not take QueuePool sizing arguments.
    if make_url(url).get_backend_name() == "sqlite":
        return {}
    return {
        "pool_recycle": 3600,
        "pool_size": 10,
        "max_overflow": 20,
    }


_database_url = settings.DATABASE_URL.get_secret_value()

engine: AsyncEngine = create_async_engine(
    _database_url,
    echo=settings.DEBUG_MODE,
    future=True,
    **_engine_options(_database_url)
)

AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

metadata = SQLModel.metadata


# =============================================================================
# Table creation
# =============================================================================
async def create_db_and_tables() -> None:
    """
    Creates any missing tables. Existing tables are left untouched.
    """
    logger.info("Creating database tables (if missing)")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables ready")


# =============================================================================
# Session dependency
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Yields one AsyncSession per request and closes it afterwards.
    """
    async with AsyncSessionLocal() as session:
        yield session
