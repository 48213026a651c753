# app/domains/department/__init__.py

"""
The 'department' domain: departments and the employees assigned to them.
"""

__all__ = []
