# app/domains/__init__.py

"""
Business domains of the application, one subpackage per aggregate:

- `employee`: employee accounts, login and password management.
- `department`: departments and their employee rosters.

Each domain holds `models.py` (tables), `schemas.py` (request/response DTOs),
`crud.py` (repository), `services.py` (business rules) and `routers.py`
(HTTP endpoints).
"""
