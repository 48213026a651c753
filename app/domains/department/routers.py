# app/domains/department/routers.py

"""
HTTP endpoints of the department domain, mounted at `/department`.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.exceptions import NotFoundError
from app.core.schemas import Message
from app.domains.employee.schemas import CurrentIdentity
from . import schemas as department_schemas
from . import services as department_services


router = APIRouter(
    tags=["Department Management"],
    responses={404: {"description": "Not found"}},
)


@router.get("/{id}", response_model=department_schemas.DepartmentReadWithEmployees, summary="Get one department with its employees")
async def read_department(
    id: int,
    db: AsyncSession = Depends(deps.get_session),
    identity: CurrentIdentity = Depends(deps.get_current_identity),
):
    department = await department_services.get_department_by_id(db, id)
    if not department:
        raise NotFoundError(department_services.DEPARTMENT_NOT_FOUND)
    return department


@router.get("", response_model=List[department_schemas.DepartmentRead], summary="List all departments")
async def read_departments(
    db: AsyncSession = Depends(deps.get_session),
    identity: CurrentIdentity = Depends(deps.get_current_identity),
):
    departments = await department_services.get_all_departments(db)
    if not departments:
        raise NotFoundError("No departments found in the database", message="Records not found")
    return departments


@router.post("", response_model=department_schemas.DepartmentRead, status_code=status.HTTP_201_CREATED, summary="Create a department")
async def create_department(
    department_in: department_schemas.DepartmentCreate,
    db: AsyncSession = Depends(deps.get_session),
    identity: CurrentIdentity = Depends(deps.can_create_department),
):
    return await department_services.create_department(db, obj_in=department_in)


@router.put("/{id}", response_model=department_schemas.DepartmentRead, summary="Update a department")
async def update_department(
    id: int,
    department_in: department_schemas.DepartmentUpdate,
    db: AsyncSession = Depends(deps.get_session),
    identity: CurrentIdentity = Depends(deps.get_current_identity),
):
    return await department_services.update_department(db, id=id, obj_in=department_in)


@router.delete("/{id}", response_model=Message, summary="Soft-delete a department")
async def delete_department(
    id: int,
    db: AsyncSession = Depends(deps.get_session),
    identity: CurrentIdentity = Depends(deps.can_delete_department),
):
    await department_services.delete_department(db, id=id)
    return {"message": f"Department with id: {id} deleted successfully"}
