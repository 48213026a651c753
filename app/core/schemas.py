# app/core/schemas.py

from pydantic import BaseModel


class Message(BaseModel):
    """Plain confirmation body, e.g. after a delete or a password change."""
    message: str
