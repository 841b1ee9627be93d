from pydantic import BaseModel, ConfigDict
from typing import Optional
from enum import Enum

from contestpro.models.auth.email import SubmittedEmail


class UserRole(str, Enum):
    """User roles"""
    USER = "user"
    ADMIN = "admin"


class UserCreate(BaseModel):
    """Schema for the sign-in upsert; unknown profile fields are stored as sent"""
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "name": "John Doe",
                "photo": "https://example.com/avatar.png"
            }
        }
    )

    email: SubmittedEmail
    name: Optional[str] = None
    photo: Optional[str] = None
