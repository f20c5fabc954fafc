"""
Authentication schemas.
"""

from pydantic import BaseModel
from typing import Optional

from expense_client.schemas.user import User


class AuthPayload(BaseModel):
    """Body of a successful login or signup response."""
    token: str
    user: User


class AuthResult(BaseModel):
    """Outcome of a session operation, never raised to the caller."""
    success: bool
    message: Optional[str] = None
