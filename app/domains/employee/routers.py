# app/domains/employee/routers.py

"""
HTTP endpoints of the employee domain, mounted at `/employee`.

Every route except `/login` requires a bearer token. Create and delete also
require an elevated role (see `app.core.security.ROLE_PERMISSIONS`).
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.exceptions import NotFoundError, UnauthorizedError
from app.core.schemas import Message
from . import schemas as employee_schemas
from . import services as employee_services


router = APIRouter(
    tags=["Employee Management"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. Authentication
# =============================================================================
@router.post("/login", response_model=employee_schemas.Token, summary="Log in and get an access token")
async def login_employee(
    credentials: employee_schemas.LoginRequest,
    db: AsyncSession = Depends(deps.get_session),
):
    token = await employee_services.login(db, email=credentials.email, password=credentials.password)
    if not token:
        raise UnauthorizedError("Invalid email or password")
    return {"token": token}


@router.get("/me", response_model=employee_schemas.CurrentIdentity, summary="Identity of the caller")
async def read_me(identity: employee_schemas.CurrentIdentity = Depends(deps.get_current_identity)):
    return identity


# =============================================================================
# 2. Reads
# =============================================================================
@router.get("/{id}", response_model=employee_schemas.EmployeeRead, summary="Get one employee")
async def read_employee(
    id: int,
    db: AsyncSession = Depends(deps.get_session),
    identity: employee_schemas.CurrentIdentity = Depends(deps.get_current_identity),
):
    employee = await employee_services.get_employee_by_id(db, id)
    if not employee:
        raise NotFoundError(employee_services.EMPLOYEE_NOT_FOUND)
    return employee


@router.get("", response_model=List[employee_schemas.EmployeeRead], summary="List all employees")
async def read_employees(
    db: AsyncSession = Depends(deps.get_session),
    identity: employee_schemas.CurrentIdentity = Depends(deps.get_current_identity),
):
    employees = await employee_services.get_all_employees(db)
    if not employees:
        raise NotFoundError("No employees found in the database", message="Records not found")
    return employees


# =============================================================================
# 3. Writes
# =============================================================================
@router.post("", response_model=employee_schemas.EmployeeRead, status_code=status.HTTP_201_CREATED, summary="Create an employee")
async def create_employee(
    employee_in: employee_schemas.EmployeeCreate,
    db: AsyncSession = Depends(deps.get_session),
    identity: employee_schemas.CurrentIdentity = Depends(deps.can_create_employee),
):
    return await employee_services.create_employee(db, obj_in=employee_in)


@router.put("/{id}", response_model=employee_schemas.EmployeeRead, summary="Update name and email")
async def update_employee(
    id: int,
    employee_in: employee_schemas.EmployeeUpdate,
    db: AsyncSession = Depends(deps.get_session),
    identity: employee_schemas.CurrentIdentity = Depends(deps.get_current_identity),
):
    return await employee_services.update_employee(db, id=id, obj_in=employee_in)


# Declared before PATCH /{id} so "password" is not parsed as an id.
@router.patch("/password", response_model=Message, summary="Change the caller's password")
async def update_employee_password(
    password_in: employee_schemas.PasswordUpdate,
    db: AsyncSession = Depends(deps.get_session),
    identity: employee_schemas.CurrentIdentity = Depends(deps.get_current_identity),
):
    updated = await employee_services.update_employee_password(
        db, id=identity.id, password_old=password_in.password_old, password_new=password_in.password_new
    )
    if not updated:
        raise NotFoundError("Employee not found or password is incorrect")
    return {"message": "Password updated successfully"}


@router.patch("/{id}", response_model=employee_schemas.EmployeeRead, summary="Change role or department")
async def update_employee_relationship(
    id: int,
    relationship_in: employee_schemas.EmployeeRelationshipUpdate,
    db: AsyncSession = Depends(deps.get_session),
    identity: employee_schemas.CurrentIdentity = Depends(deps.get_current_identity),
):
    return await employee_services.update_employee_relationship(db, id=id, obj_in=relationship_in)


@router.delete("/{id}", response_model=Message, summary="Soft-delete an employee")
async def delete_employee(
    id: int,
    db: AsyncSession = Depends(deps.get_session),
    identity: employee_schemas.CurrentIdentity = Depends(deps.can_delete_employee),
):
    await employee_services.delete_employee(db, id=id)
    return {"message": f"Employee with id: {id} deleted successfully"}
