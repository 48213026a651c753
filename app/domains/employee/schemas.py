# app/domains/employee/schemas.py

"""
Request/response DTOs for the employee domain.

No read schema declares `password`, so hashes never reach a response body.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr
from pydantic import Field as PydanticField
from sqlmodel import SQLModel, Field

from app.domains.department.schemas import DepartmentRead
from .models import Role


# =============================================================================
# 1. Employee
# =============================================================================
class EmployeeBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., max_length=255)
    role: Role = Field(default=Role.EMPLOYEE)


class EmployeeCreate(EmployeeBase):
    """Body of `POST /employee`. `department` is the department id."""
    password: str = Field(..., min_length=1, max_length=72)
    # Optional here so a missing department yields "Department is required"
    # from the service instead of a generic field error.
    department: Optional[int] = None


class EmployeeUpdate(SQLModel):
    """Body of `PUT /employee/{id}`: partial update of profile fields."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = Field(None, max_length=255)


class EmployeeRelationshipUpdate(SQLModel):
    """Body of `PATCH /employee/{id}`: role and/or department reassignment."""
    role: Optional[Role] = None
    department: Optional[int] = None


class EmployeeRead(SQLModel):
    id: int
    name: str
    email: str
    role: Role
    department_id: Optional[int] = None
    department: Optional[DepartmentRead] = None
    created_at: datetime
    updated_at: datetime


# =============================================================================
# 2. Authentication
# =============================================================================
class LoginRequest(BaseModel):
    email: str
    password: str


class Token(BaseModel):
    token: str


class CurrentIdentity(BaseModel):
    """Identity decoded from an access token (`GET /employee/me`)."""
    id: int
    name: str
    email: str
    role: Role


class PasswordUpdate(BaseModel):
    """Body of `PATCH /employee/password`."""
    model_config = ConfigDict(populate_by_name=True)

    password_old: str = PydanticField(..., alias="passwordOld", min_length=1)
    password_new: str = PydanticField(..., alias="passwordNew", min_length=1, max_length=72)
