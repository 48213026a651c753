# scripts/create_admin.py

"""
Creates the first ADMIN employee.

Creating employees over HTTP already requires an HR or ADMIN caller, so a fresh
database needs one account seeded from the command line:

    python -m scripts.create_admin --email admin@company.com --name Admin
"""

import asyncio
import logging
from typing import Optional

import typer
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import AsyncSessionLocal, create_db_and_tables
from app.core.exceptions import AppError
from app.domains.department import crud as department_crud
from app.domains.department import models as department_models
from app.domains.employee import models as employee_models
from app.domains.employee import schemas as employee_schemas
from app.domains.employee import services as employee_services

logger = logging.getLogger(__name__)

cli = typer.Typer()


async def get_or_create_department(db: AsyncSession, *, name: str) -> department_models.Department:
    department = await department_crud.department.find_one(db, filters={"name": name})
    if department:
        return department
    return await department_crud.department.save(
        db, db_obj=department_models.Department(name=name, description="Created by create_admin")
    )


async def create_admin_employee(
    db: AsyncSession, *, email: str, password: str, name: str, department_name: str
) -> Optional[employee_models.Employee]:
    """
    Creates an ADMIN employee in `department_name` (created if missing).
    Returns None when the email is already taken.
    """
    department = await get_or_create_department(db, name=department_name)
    employee_in = employee_schemas.EmployeeCreate(
        name=name,
        email=email,
        password=password,
        role=employee_models.Role.ADMIN,
        department=department.id,
    )
    try:
        return await employee_services.create_employee(db, obj_in=employee_in)
    except AppError as e:
        logger.error("Could not create admin %s: %s", email, "; ".join(e.details))
        return None


@cli.command()
def main(
    email: str = typer.Option(
        ..., '--email', '-e',
        prompt="Admin email",
        help="Login email of the admin account."
    ),
    password: str = typer.Option(
        ..., '--password', '-p',
        prompt="Admin password",
        hide_input=True,
        confirmation_prompt=True,
        help="Password of the admin account (at least 8 characters)."
    ),
    name: str = typer.Option(
        "Admin", '--name', '-n',
        help="Display name of the admin."
    ),
    department_name: str = typer.Option(
        "Administration", '--department', '-d',
        help="Department the admin belongs to; created if missing."
    ),
):
    """
    Creates a new ADMIN employee.
    """
    if len(password) < 8:
        typer.echo("Error: the password must be at least 8 characters long.", err=True)
        raise typer.Abort()

    async def run_creation():
        await create_db_and_tables()
        async with AsyncSessionLocal() as db:
            return await create_admin_employee(
                db, email=email, password=password, name=name, department_name=department_name
            )

    admin = asyncio.run(run_creation())
    if admin is None:
        typer.echo(f"Error: an employee with email {email} already exists.", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Admin account created: {admin.email} (id {admin.id})")


if __name__ == "__main__":
    cli()
