# app/domains/employee/crud.py

"""
Repository for the `employees` table.
"""

from typing import Optional

from sqlalchemy.orm import selectinload
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from . import models as employee_models
from . import schemas as employee_schemas


class CRUDEmployee(CRUDBase[employee_models.Employee, employee_schemas.EmployeeCreate, employee_schemas.EmployeeUpdate]):
    # Responses embed the department, so it is loaded with every read.
    default_options = (selectinload(employee_models.Employee.department),)

    def __init__(self):
        super().__init__(model=employee_models.Employee)

    async def get_by_email(
        self, db: AsyncSession, *, email: str, include_deleted: bool = False
    ) -> Optional[employee_models.Employee]:
        """Looks an employee up by email. Soft-deleted rows still hold their email."""
        return await self.get_by_attribute(db, attribute="email", value=email, include_deleted=include_deleted)


employee = CRUDEmployee()
