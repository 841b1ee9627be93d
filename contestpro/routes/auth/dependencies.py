from typing import Optional
from fastapi import Depends, Header
from motor.motor_asyncio import AsyncIOMotorDatabase

from contestpro.database import get_database
from contestpro.models.auth.token import TokenData
from contestpro.services.auth.security import security_service
from contestpro.services.auth.user_service import UserService
from contestpro.core.exceptions import AuthMissingError, AuthInvalidError, ForbiddenError


async def get_current_user(
    authorization: Optional[str] = Header(None)
) -> TokenData:
    """Decode the bearer token; rejects the request when it is absent or invalid"""
    if not authorization:
        raise AuthMissingError()

    parts = authorization.split(" ")
    token = parts[1] if len(parts) > 1 else None
    if not token:
        print("[ERROR] Token missing from authorization header")
        raise AuthInvalidError()

    token_data = security_service.verify_token(token)
    if token_data is None:
        raise AuthInvalidError()

    return token_data


async def get_admin_user(
    current_user: TokenData = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
) -> TokenData:
    """Require the token holder to be an admin"""
    user_service = UserService(db)
    if not await user_service.is_admin(current_user.email):
        raise ForbiddenError()
    return current_user
