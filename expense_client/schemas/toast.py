"""
Toast notification schemas.
"""

import enum
from pydantic import BaseModel


class Severity(str, enum.Enum):
    """Toast severity enumeration."""
    success = "success"
    error = "error"
    warning = "warning"


class Toast(BaseModel):
    id: str
    message: str
    severity: Severity
    expires_at: float
