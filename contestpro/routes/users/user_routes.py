from fastapi import APIRouter, Depends, Query
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorDatabase

from contestpro.database import get_database
from contestpro.models.auth.user import UserCreate
from contestpro.models.auth.token import TokenData
from contestpro.services.auth.user_service import UserService
from contestpro.routes.auth.dependencies import get_current_user, get_admin_user
from contestpro.core.exceptions import ForbiddenError
from contestpro.utils.response import json_response, update_result, delete_result

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("")
async def get_users(
    profile: Optional[str] = Query(None, description="Email of a single user to fetch"),
    email: Optional[str] = Query(None, description="Alias of profile"),
    admin: TokenData = Depends(get_admin_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    List users (admin only).

    - profile / email: return that one user (or null)
    - otherwise: every user
    """
    user_service = UserService(db)

    lookup_email = profile or email
    if lookup_email:
        user = await user_service.get_user_by_email(lookup_email)
        return json_response(user)

    users = await user_service.get_users()
    return json_response(users)


@router.get("/role/{email}")
async def get_user_role(
    email: str,
    current_user: TokenData = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Return {_id, role} for the token holder's own account"""
    if email != current_user.email:
        raise ForbiddenError()

    user_service = UserService(db)
    user = await user_service.get_role(email)
    return json_response(user)


@router.post("")
async def create_user(
    user_data: UserCreate,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Create the user on first sign-in; later sign-ins are no-ops"""
    user_service = UserService(db)
    created, inserted_id = await user_service.create_user(user_data)

    if not created:
        return json_response({"message": "User already exists", "insertedId": None})

    return json_response({"acknowledged": True, "insertedId": inserted_id})


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    admin: TokenData = Depends(get_admin_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Delete a user (admin only)"""
    user_service = UserService(db)
    result = await user_service.delete_user(user_id)
    return json_response(delete_result(result))


@router.patch("/{user_id}")
async def update_user_role(
    user_id: str,
    role: Optional[str] = Query(None),
    admin: TokenData = Depends(get_admin_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Change a user's role (admin only)"""
    user_service = UserService(db)
    result = await user_service.update_role(user_id, role)
    return json_response(update_result(result))
