# app/domains/employee/models.py

"""
ORM model for the `employees` table and the role enumeration.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from app.core.database_base import (
    created_at_field,
    deleted_at_field,
    id_field,
    updated_at_field,
)

if TYPE_CHECKING:
    from app.domains.department.models import Department


class Role(str, Enum):
    """Authorization tier carried by every employee and by their access token."""
    ADMIN = "ADMIN"
    HR = "HR"
    EMPLOYEE = "EMPLOYEE"


class Employee(SQLModel, table=True):
    """
    An employee account. `password` holds the bcrypt hash, never plain text.
    """
    __tablename__ = "employees"

    id: Optional[int] = id_field("Employee id")
    name: str = Field(max_length=100, description="Full name")
    email: str = Field(max_length=255, sa_column_kwargs={"unique": True}, description="Login email (unique)")
    password: str = Field(max_length=255, description="bcrypt password hash")
    role: Role = Field(default=Role.EMPLOYEE, description="Authorization role")
    department_id: Optional[int] = Field(default=None, foreign_key="departments.id", description="Department (FK)")

    created_at: Optional[datetime] = created_at_field()
    updated_at: Optional[datetime] = updated_at_field()
    deleted_at: Optional[datetime] = deleted_at_field()

    department: Optional["Department"] = Relationship(back_populates="employees")
