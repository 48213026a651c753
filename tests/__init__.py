# tests/__init__.py

"""
Test suite of the employee directory API.

`conftest.py` holds the shared fixtures (in-memory database, factories and
HTTP clients); `domains/` holds the per-domain endpoint tests.
"""

__all__ = []
