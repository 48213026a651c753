# app/core/crud_base.py

"""
Base class for the per-table repositories.

Every read excludes soft-deleted rows unless `include_deleted=True` is passed.
Deletion is always a soft delete: the row keeps existing with `deleted_at` set.
"""

from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm.interfaces import LoaderOption
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database_base import not_deleted, utcnow

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Find-all / find-one / save / soft-delete operations for one model.
    Subclasses set `default_options` to eager-load relationships on every read.
    """
    default_options: Sequence[LoaderOption] = ()

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def _select(self, *, include_deleted: bool = False, options: Optional[Sequence[LoaderOption]] = None):
        query = select(self.model)
        if not include_deleted:
            query = query.where(not_deleted(self.model))
        loader_options = self.default_options if options is None else options
        if loader_options:
            query = query.options(*loader_options)
        # Refresh objects already in the identity map (e.g. after a commit).
        return query.execution_options(populate_existing=True)

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """Returns the live record with primary key `id`, or None."""
        query = self._select().where(self.model.id == id)
        result = await db.execute(query)
        return result.scalars().one_or_none()

    async def get_multi(self, db: AsyncSession) -> List[ModelType]:
        """Returns every live record ordered by id."""
        query = self._select().order_by(self.model.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_by_attribute(
        self, db: AsyncSession, *, attribute: str, value: Any, include_deleted: bool = False
    ) -> Optional[ModelType]:
        query = self._select(include_deleted=include_deleted).where(getattr(self.model, attribute) == value)
        result = await db.execute(query)
        return result.scalars().first()

    async def get_one_filtered(
        self,
        db: AsyncSession,
        *,
        filters: Optional[Dict[str, Any]] = None,
        options: Optional[Sequence[LoaderOption]] = None,
    ) -> Optional[ModelType]:
        """
        Returns the first live record matching every `attribute == value` pair in
        `filters`. `options` replaces the default eager-load options.
        """
        query = self._select(options=options)
        for attribute, value in (filters or {}).items():
            if not hasattr(self.model, attribute):
                raise AttributeError(f"{self.model.__name__} has no attribute '{attribute}'")
            query = query.where(getattr(self.model, attribute) == value)
        result = await db.execute(query)
        return result.scalars().first()

    async def save(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """Inserts or updates `db_obj` and returns it reloaded with its relationships."""
        db.add(db_obj)
        await db.commit()
        return await self.get(db, db_obj.id)

    async def update(self, db: AsyncSession, *, db_obj: ModelType, obj_in: UpdateSchemaType) -> ModelType:
        """Applies the fields explicitly set (and not null) in `obj_in` and saves."""
        update_data = obj_in.model_dump(exclude_unset=True, exclude_none=True)
        for key, value in update_data.items():
            setattr(db_obj, key, value)
        return await self.save(db, db_obj=db_obj)

    async def soft_remove(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """Marks `db_obj` deleted. The row stays in the table."""
        db_obj.deleted_at = utcnow()
        db.add(db_obj)
        await db.commit()
        return db_obj
