# app/domains/department/models.py

"""
ORM model for the `departments` table.
"""

from datetime import datetime
from typing import List, Optional, TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from app.core.database_base import (
    created_at_field,
    deleted_at_field,
    id_field,
    updated_at_field,
)

if TYPE_CHECKING:
    from app.domains.employee.models import Employee


class Department(SQLModel, table=True):
    """
    A department. `employees` is derived from `Employee.department_id`; it is not
    stored on this table.
    """
    __tablename__ = "departments"

    id: Optional[int] = id_field("Department id")
    name: str = Field(max_length=100, description="Department name")
    description: str = Field(default="", description="Free-form description")

    created_at: Optional[datetime] = created_at_field()
    updated_at: Optional[datetime] = updated_at_field()
    deleted_at: Optional[datetime] = deleted_at_field()

    employees: List["Employee"] = Relationship(back_populates="department")
