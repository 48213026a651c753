# app/domains/department/crud.py

"""
Repository for the `departments` table.
"""

from typing import Any, Dict, Optional

from sqlalchemy import func
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.core.database_base import not_deleted
from app.domains.employee.models import Employee
from . import models as department_models
from . import schemas as department_schemas


class CRUDDepartment(CRUDBase[department_models.Department, department_schemas.DepartmentCreate, department_schemas.DepartmentUpdate]):
    def __init__(self):
        super().__init__(model=department_models.Department)

    @staticmethod
    def with_employees():
        # Only live employees belong to the roster.
        return [selectinload(department_models.Department.employees.and_(not_deleted(Employee)))]

    async def find_one(
        self, db: AsyncSession, *, filters: Dict[str, Any], load_employees: bool = False
    ) -> Optional[department_models.Department]:
        options = self.with_employees() if load_employees else None
        return await self.get_one_filtered(db, filters=filters, options=options)

    async def count_employees(self, db: AsyncSession, *, id: int) -> int:
        statement = (
            select(func.count())
            .select_from(Employee)
            .where(Employee.department_id == id, not_deleted(Employee))
        )
        result = await db.execute(statement)
        return result.scalar_one()


department = CRUDDepartment()
