# app/domains/employee/services.py

"""
Business rules for employees: login, creation with department resolution,
profile/relationship updates, password changes and soft deletion.
"""

import logging
from typing import List, Optional

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import BadRequestError, ConflictError, NotFoundError
from app.core.security import create_access_token, get_password_hash, verify_password
from app.domains.department import crud as department_crud
from app.domains.department import models as department_models
from . import crud, models, schemas

logger = logging.getLogger(__name__)

EMPLOYEE_NOT_FOUND = "Employee not found in the database for the given id"
EMAIL_EXISTS = "Email already exists"

_email_adapter = TypeAdapter(EmailStr)


def normalize_email(email: str) -> str:
    """
    Applies the normalization `EmailStr` applies on create and update (the
    domain part is lowercased), so lookups match the stored address.
    Strings that are not valid addresses are returned unchanged.
    """
    try:
        return _email_adapter.validate_python(email)
    except PydanticValidationError:
        return email


def is_unique_violation(error: IntegrityError) -> bool:
    # PostgreSQL: "duplicate key value violates unique constraint", SQLite: "UNIQUE constraint failed"
    return "unique" in str(error.orig).lower()


async def _save(db: AsyncSession, employee: models.Employee) -> models.Employee:
    try:
        return await crud.employee.save(db, db_obj=employee)
    except IntegrityError as e:
        await db.rollback()
        if is_unique_violation(e):
            raise ConflictError(EMAIL_EXISTS)
        raise


async def _resolve_department(db: AsyncSession, department_id: int) -> department_models.Department:
    department = await department_crud.department.get(db, department_id)
    if department is None:
        raise BadRequestError(f"Department with id {department_id} does not exist")
    return department


async def _ensure_email_free(db: AsyncSession, email: str) -> None:
    if await crud.employee.get_by_email(db, email=email, include_deleted=True):
        raise ConflictError(EMAIL_EXISTS)


async def _get_or_404(db: AsyncSession, id: int) -> models.Employee:
    employee = await crud.employee.get(db, id)
    if employee is None:
        raise NotFoundError(EMPLOYEE_NOT_FOUND)
    return employee


# =============================================================================
# 1. Authentication
# =============================================================================
async def login(db: AsyncSession, *, email: str, password: str) -> Optional[str]:
    """
    Returns a signed access token, or None when the email is unknown or the
    password does not match. Both failures look the same to the caller.
    """
    employee = await crud.employee.get_by_email(db, email=normalize_email(email))
    if employee is None or not verify_password(password, employee.password):
        logger.info("Failed login for %s", email)
        return None

    logger.info("Employee %d logged in", employee.id)
    return create_access_token({
        "sub": str(employee.id),
        "name": employee.name,
        "email": employee.email,
        "role": employee.role.value,
    })


# =============================================================================
# 2. Reads
# =============================================================================
async def get_all_employees(db: AsyncSession) -> List[models.Employee]:
    return await crud.employee.get_multi(db)


async def get_employee_by_id(db: AsyncSession, id: int) -> Optional[models.Employee]:
    return await crud.employee.get(db, id)


# =============================================================================
# 3. Writes
# =============================================================================
async def create_employee(db: AsyncSession, *, obj_in: schemas.EmployeeCreate) -> models.Employee:
    """
    Creates an employee in an existing department with a hashed password.
    """
    if not obj_in.department:
        raise BadRequestError("Department is required")
    department = await _resolve_department(db, obj_in.department)
    await _ensure_email_free(db, obj_in.email)

    employee = models.Employee(
        name=obj_in.name,
        email=obj_in.email,
        role=obj_in.role,
        password=get_password_hash(obj_in.password),
        department_id=department.id,
    )
    created = await _save(db, employee)
    logger.info("Created employee %d in department %d", created.id, department.id)
    return created


async def update_employee(db: AsyncSession, *, id: int, obj_in: schemas.EmployeeUpdate) -> models.Employee:
    """Partial update of name and email."""
    employee = await _get_or_404(db, id)
    if obj_in.email is not None and obj_in.email != employee.email:
        await _ensure_email_free(db, obj_in.email)

    for key, value in obj_in.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(employee, key, value)
    return await _save(db, employee)


async def update_employee_relationship(
    db: AsyncSession, *, id: int, obj_in: schemas.EmployeeRelationshipUpdate
) -> schemas.EmployeeRead:
    """
    Changes role and/or department. The result is an `EmployeeRead`, which has
    no password field.
    """
    employee = await _get_or_404(db, id)
    if obj_in.role is not None:
        employee.role = obj_in.role
    if obj_in.department is not None:
        department = await _resolve_department(db, obj_in.department)
        employee.department_id = department.id

    updated = await _save(db, employee)
    return schemas.EmployeeRead.model_validate(updated)


async def update_employee_password(
    db: AsyncSession, *, id: int, password_old: str, password_new: str
) -> Optional[models.Employee]:
    """
    Replaces the password hash if `password_old` matches. Returns None when the
    employee does not exist or the old password is wrong.
    """
    employee = await crud.employee.get(db, id)
    if employee is None or not verify_password(password_old, employee.password):
        return None

    employee.password = get_password_hash(password_new)
    updated = await _save(db, employee)
    logger.info("Employee %d changed their password", id)
    return updated


async def delete_employee(db: AsyncSession, *, id: int) -> models.Employee:
    """Soft-deletes the employee; the row is kept with `deleted_at` set."""
    employee = await _get_or_404(db, id)
    deleted = await crud.employee.soft_remove(db, db_obj=employee)
    logger.info("Soft-deleted employee %d", id)
    return deleted
