# app/core/__init__.py

"""
Core components shared by every domain:

- `config.py`: settings loaded from the environment (pydantic-settings).
- `database.py` / `database_base.py`: async engine, sessions and the common record columns.
- `crud_base.py`: repository base with soft-delete aware reads.
- `security.py` / `dependencies.py`: password hashing, JWT and role checks.
- `exceptions.py` / `middleware.py`: error bodies, request logging and CORS.
"""

__all__ = []
