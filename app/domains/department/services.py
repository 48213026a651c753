# app/domains/department/services.py

import logging
from typing import List, Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import BadRequestError, NotFoundError
from . import crud, models, schemas

logger = logging.getLogger(__name__)

DEPARTMENT_NOT_FOUND = "Department not found in the database for the given id"


async def get_all_departments(db: AsyncSession) -> List[models.Department]:
    return await crud.department.get_multi(db)


async def get_department_by_id(db: AsyncSession, id: int, *, load_employees: bool = True) -> Optional[models.Department]:
    return await crud.department.find_one(db, filters={"id": id}, load_employees=load_employees)


async def create_department(db: AsyncSession, *, obj_in: schemas.DepartmentCreate) -> models.Department:
    department = models.Department.model_validate(obj_in)
    created = await crud.department.save(db, db_obj=department)
    logger.info("Created department %d", created.id)
    return created


async def update_department(db: AsyncSession, *, id: int, obj_in: schemas.DepartmentUpdate) -> models.Department:
    department = await crud.department.get(db, id)
    if department is None:
        raise NotFoundError(DEPARTMENT_NOT_FOUND)
    return await crud.department.update(db, db_obj=department, obj_in=obj_in)


async def delete_department(db: AsyncSession, *, id: int) -> models.Department:
    """
    Soft-deletes a department. Employees are never deleted along with it, so a
    department that still has live employees is refused.
    """
    department = await crud.department.get(db, id)
    if department is None:
        raise NotFoundError(DEPARTMENT_NOT_FOUND)

    if await crud.department.count_employees(db, id=id):
        raise BadRequestError(
            "Cannot delete department: associated employees exist. "
            "Please reassign or delete them first."
        )

    deleted = await crud.department.soft_remove(db, db_obj=department)
    logger.info("Soft-deleted department %d", id)
    return deleted
