"""
User schemas.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class UserProfile(BaseModel):
    """Optional profile details attached to a user."""
    model_config = ConfigDict(extra="allow")

    phone: Optional[str] = None


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(..., alias="_id", validation_alias=AliasChoices("_id", "id"))
    username: str
    email: str
    profile: Optional[UserProfile] = None
    created_at: Optional[datetime] = Field(
        None, alias="createdAt", validation_alias=AliasChoices("createdAt", "created_at")
    )


class UserUpdate(BaseModel):
    """Partial profile update sent to the backend."""
    username: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None
    profile: Optional[UserProfile] = None
