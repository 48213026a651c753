# app/__init__.py

"""
Employee Directory FastAPI application package.

The package is split into a `core` subpackage (configuration, database,
security, error handling, middleware) and a `domains` subpackage holding one
package per business aggregate (`employee`, `department`).
"""

APP_NAME = "Employee Directory API"
APP_VERSION = "0.1.0"

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "HTTP CRUD service for employees and departments."
__all__ = []
