# app/domains/employee/__init__.py

"""
The 'employee' domain: employee accounts, login, password management and
role/department assignment.

Submodules:
- `models.py`: the `employees` table and the `Role` enum.
- `schemas.py`: request/response DTOs and the token identity.
- `crud.py`: repository over the `employees` table.
- `services.py`: business rules (login, creation, updates, soft delete).
- `routers.py`: endpoints mounted at `/employee`.
"""

__all__ = []
