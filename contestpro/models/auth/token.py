from pydantic import BaseModel, ConfigDict
from typing import Optional

from contestpro.models.auth.email import SubmittedEmail


class TokenRequest(BaseModel):
    """Claims to sign; anything beyond email is copied into the token"""
    model_config = ConfigDict(extra="allow")

    email: SubmittedEmail


class Token(BaseModel):
    """Token response schema"""
    token: str


class TokenData(BaseModel):
    """Token payload data"""
    email: Optional[str] = None
