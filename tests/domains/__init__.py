# tests/domains/__init__.py

"""
Endpoint tests grouped by domain (employee, department, authentication).
"""

__all__ = []
