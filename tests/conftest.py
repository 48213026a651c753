# tests/conftest.py

import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable

# Settings are read at import time; give the test run its own values first.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("CORS_ORIGIN", "http://localhost:5173")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.main import app as main_app
from app.core.database import get_session
from app.core.security import get_password_hash

# Registers every table on SQLModel.metadata
from app.domains.models import *  # noqa: F401, F403
from app.domains.department import models as department_models
from app.domains.employee import models as employee_models

TEST_DATABASE_URL = "sqlite+aiosqlite://"

ADMIN_PASSWORD = "adminpass123"
HR_PASSWORD = "hrpass123"
EMPLOYEE_PASSWORD = "employeepass123"


# --- Database fixtures ---
@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    A fresh in-memory database per test. StaticPool keeps the single
    connection (and therefore the database) alive for the whole test.
    """
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session

    await test_engine.dispose()


# --- Department / employee factories ---
@pytest_asyncio.fixture(scope="function")
def department_factory(db_session: AsyncSession) -> Callable[..., Awaitable[department_models.Department]]:
    async def _create_department(name: str, description: str = "") -> department_models.Department:
        department = department_models.Department(name=name, description=description)
        db_session.add(department)
        await db_session.commit()
        await db_session.refresh(department)
        return department
    return _create_department


@pytest_asyncio.fixture(scope="function")
def employee_factory(db_session: AsyncSession) -> Callable[..., Awaitable[employee_models.Employee]]:
    """
    Returns a factory that stores an employee with a hashed password.
    """
    async def _create_employee(
        name: str,
        password: str,
        role: employee_models.Role,
        department_id: int,
        email: str = None,
    ) -> employee_models.Employee:
        employee = employee_models.Employee(
            name=name,
            email=email or f"{name.lower()}@company.com",
            password=get_password_hash(password),
            role=role,
            department_id=department_id,
        )
        db_session.add(employee)
        await db_session.commit()
        await db_session.refresh(employee)
        return employee
    return _create_employee


@pytest_asyncio.fixture(scope="function")
async def test_department(department_factory: Callable) -> department_models.Department:
    return await department_factory("Engineering", "Builds the product")


@pytest_asyncio.fixture(scope="function")
async def test_other_department(department_factory: Callable) -> department_models.Department:
    return await department_factory("Finance", "Keeps the books")


@pytest_asyncio.fixture(scope="function")
async def test_admin(employee_factory: Callable, test_department: department_models.Department) -> employee_models.Employee:
    return await employee_factory("Admin", ADMIN_PASSWORD, employee_models.Role.ADMIN, test_department.id)


@pytest_asyncio.fixture(scope="function")
async def test_hr(employee_factory: Callable, test_department: department_models.Department) -> employee_models.Employee:
    return await employee_factory("Harriet", HR_PASSWORD, employee_models.Role.HR, test_department.id)


@pytest_asyncio.fixture(scope="function")
async def test_employee(employee_factory: Callable, test_department: department_models.Department) -> employee_models.Employee:
    return await employee_factory("Eve", EMPLOYEE_PASSWORD, employee_models.Role.EMPLOYEE, test_department.id)


# --- HTTP clients ---
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Unauthenticated client whose requests use the test database session.
    """
    def override_get_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides[get_session] = override_get_session
        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


@pytest_asyncio.fixture(scope="function")
def authorized_client_factory(client: AsyncClient):
    """
    Returns a context manager factory that logs `employee` in through
    `POST /employee/login` and yields the client carrying the bearer token.
    """
    @asynccontextmanager
    async def _create_client_context(employee: employee_models.Employee, password: str) -> AsyncGenerator[AsyncClient, None]:
        res = await client.post("/employee/login", json={"email": employee.email, "password": password})
        if res.status_code != 200:
            pytest.fail(f"Login failed for {employee.email}: {res.text}")

        client.headers["Authorization"] = f"Bearer {res.json()['token']}"
        try:
            yield client
        finally:
            client.headers.pop("Authorization", None)

    return _create_client_context


@pytest_asyncio.fixture(scope="function")
async def admin_client(authorized_client_factory: Callable, test_admin: employee_models.Employee) -> AsyncGenerator[AsyncClient, None]:
    async with authorized_client_factory(test_admin, ADMIN_PASSWORD) as authed:
        yield authed


@pytest_asyncio.fixture(scope="function")
async def hr_client(authorized_client_factory: Callable, test_hr: employee_models.Employee) -> AsyncGenerator[AsyncClient, None]:
    async with authorized_client_factory(test_hr, HR_PASSWORD) as authed:
        yield authed


@pytest_asyncio.fixture(scope="function")
async def employee_client(authorized_client_factory: Callable, test_employee: employee_models.Employee) -> AsyncGenerator[AsyncClient, None]:
    async with authorized_client_factory(test_employee, EMPLOYEE_PASSWORD) as authed:
        yield authed
