# app/core/dependencies.py

"""
Dependencies shared by the domain routers.

Routers import this module as `deps` so that session, authentication and
authorization dependencies come from one place.
"""

# flake8: noqa
from app.core.database import get_session
from app.core.security import (
    get_current_identity,  # any authenticated caller
    require_permission,    # role check for one operation
)

# Authorization dependencies, one per protected operation
can_create_employee = require_permission("employee:create")
can_delete_employee = require_permission("employee:delete")
can_create_department = require_permission("department:create")
can_delete_department = require_permission("department:delete")
