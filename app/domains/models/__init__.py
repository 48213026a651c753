# app/domains/models/__init__.py

"""
Imports every table model in one place so that SQLModel.metadata knows all
tables and the relationship strings ("Employee", "Department") resolve.
"""

from app.domains.department.models import Department
from app.domains.employee.models import Employee, Role

__all__ = ["Department", "Employee", "Role"]
