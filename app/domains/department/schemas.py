# app/domains/department/schemas.py

"""
Request/response DTOs for the department domain.
"""

from datetime import datetime
from typing import List, Optional

from sqlmodel import SQLModel, Field

from app.domains.employee.models import Role


class DepartmentBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field("", max_length=1000)


class DepartmentCreate(DepartmentBase):
    pass


class DepartmentUpdate(SQLModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)


class DepartmentRead(DepartmentBase):
    id: int
    created_at: datetime
    updated_at: datetime


class DepartmentEmployee(SQLModel):
    """Employee entry listed inside a department."""
    id: int
    name: str
    email: str
    role: Role


class DepartmentReadWithEmployees(DepartmentRead):
    employees: List[DepartmentEmployee] = []
