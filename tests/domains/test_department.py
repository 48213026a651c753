# tests/domains/test_department.py

"""
Integration tests for the department endpoints.
"""

from typing import Callable

import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.domains.department.models import Department
from app.domains.employee import crud as employee_crud
from app.domains.employee.models import Employee, Role
from app.domains.employee.schemas import CurrentIdentity
from app.main import app as main_app


# =============================================================================
# 1. Create
# =============================================================================
@pytest.mark.asyncio
async def test_create_department_as_admin(admin_client: AsyncClient):
    response = await admin_client.post("/department", json={"name": "Research", "description": "Labs"})

    assert response.status_code == 201
    body = response.json()
    assert isinstance(body["id"], int)
    assert body["name"] == "Research"
    assert body["description"] == "Labs"


@pytest.mark.asyncio
async def test_create_department_as_hr_without_description(hr_client: AsyncClient):
    response = await hr_client.post("/department", json={"name": "Support"})

    assert response.status_code == 201
    assert response.json()["description"] == ""


@pytest.mark.asyncio
async def test_create_department_forbidden_for_employee_role(
    employee_client: AsyncClient, db_session: AsyncSession
):
    response = await employee_client.post("/department", json={"name": "Shadow IT"})

    assert response.status_code == 403
    assert response.json()["details"] == ["You are not authorized to create a department"]
    result = await db_session.execute(select(Department).where(Department.name == "Shadow IT"))
    assert result.scalars().first() is None


@pytest.mark.asyncio
async def test_create_department_requires_name(admin_client: AsyncClient):
    response = await admin_client.post("/department", json={"description": "no name"})

    assert response.status_code == 400
    assert response.json()["details"][0].startswith("name")


# =============================================================================
# 2. Read
# =============================================================================
@pytest.mark.asyncio
async def test_read_department_lists_live_employees(
    employee_client: AsyncClient,
    employee_factory: Callable,
    test_department: Department,
    test_employee: Employee,
    db_session: AsyncSession,
):
    """
    Soft-deleted employees drop out of the department roster.
    """
    leaver = await employee_factory("Leo", "leopass123", Role.EMPLOYEE, test_department.id)
    await employee_crud.employee.soft_remove(db_session, db_obj=leaver)

    response = await employee_client.get(f"/department/{test_department.id}")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Engineering"
    roster = {e["email"] for e in body["employees"]}
    assert test_employee.email in roster
    assert leaver.email not in roster
    assert all("password" not in e for e in body["employees"])


@pytest.mark.asyncio
async def test_read_department_not_found(employee_client: AsyncClient):
    response = await employee_client.get("/department/9999")

    assert response.status_code == 404
    assert response.json()["details"] == ["Department not found in the database for the given id"]


@pytest.mark.asyncio
async def test_read_departments(employee_client: AsyncClient, test_other_department: Department):
    response = await employee_client.get("/department")

    assert response.status_code == 200
    assert [d["name"] for d in response.json()] == ["Engineering", "Finance"]


@pytest.mark.asyncio
async def test_read_departments_empty_returns_404(client: AsyncClient):
    def override_identity():
        return CurrentIdentity(id=1, name="Ghost", email="ghost@company.com", role=Role.EMPLOYEE)

    main_app.dependency_overrides[deps.get_current_identity] = override_identity
    response = await client.get("/department")

    assert response.status_code == 404
    assert response.json() == {
        "status": 404,
        "message": "Records not found",
        "details": ["No departments found in the database"],
    }


@pytest.mark.asyncio
async def test_read_departments_requires_token(client: AsyncClient):
    response = await client.get("/department")
    assert response.status_code == 401


# =============================================================================
# 3. Update
# =============================================================================
@pytest.mark.asyncio
async def test_update_department(employee_client: AsyncClient, test_department: Department):
    response = await employee_client.put(
        f"/department/{test_department.id}", json={"description": "Ships the product"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Engineering"
    assert body["description"] == "Ships the product"


@pytest.mark.asyncio
async def test_update_department_not_found(employee_client: AsyncClient):
    response = await employee_client.put("/department/9999", json={"name": "Ghost"})
    assert response.status_code == 404


# =============================================================================
# 4. Delete
# =============================================================================
@pytest.mark.asyncio
async def test_delete_department_with_employees_is_refused(
    hr_client: AsyncClient, test_department: Department
):
    response = await hr_client.delete(f"/department/{test_department.id}")

    assert response.status_code == 400
    assert response.json()["details"] == [
        "Cannot delete department: associated employees exist. Please reassign or delete them first."
    ]
    assert (await hr_client.get(f"/department/{test_department.id}")).status_code == 200


@pytest.mark.asyncio
async def test_delete_empty_department(
    hr_client: AsyncClient, test_other_department: Department, db_session: AsyncSession
):
    response = await hr_client.delete(f"/department/{test_other_department.id}")

    assert response.status_code == 200
    assert response.json() == {"message": f"Department with id: {test_other_department.id} deleted successfully"}
    assert (await hr_client.get(f"/department/{test_other_department.id}")).status_code == 404

    await db_session.refresh(test_other_department)
    assert test_other_department.deleted_at is not None


@pytest.mark.asyncio
async def test_delete_department_not_found(admin_client: AsyncClient):
    response = await admin_client.delete("/department/9999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_department_forbidden_for_employee_role(
    employee_client: AsyncClient, test_other_department: Department
):
    response = await employee_client.delete(f"/department/{test_other_department.id}")

    assert response.status_code == 403
    assert response.json()["details"] == ["You are not authorized to delete a department"]


@pytest.mark.asyncio
async def test_new_employee_cannot_join_deleted_department(
    admin_client: AsyncClient, test_other_department: Department
):
    await admin_client.delete(f"/department/{test_other_department.id}")

    response = await admin_client.post(
        "/employee",
        json={"name": "Late", "email": "late@company.com", "password": "p", "department": test_other_department.id},
    )
    assert response.status_code == 400
