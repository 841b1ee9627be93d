from fastapi import APIRouter, Depends, Query
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorDatabase

from contestpro.database import get_database
from contestpro.models.auth.token import TokenData
from contestpro.models.contest.contest import ContestCreate
from contestpro.services.contest.contest import ContestService
from contestpro.services.auth.user_service import UserService
from contestpro.routes.auth.dependencies import get_current_user, get_admin_user
from contestpro.core.exceptions import ForbiddenError, NotFoundError
from contestpro.utils.response import json_response, error_response, insert_result, delete_result

router = APIRouter(prefix="/contests", tags=["Contests"])


@router.get("")
async def get_contests(
    isPending: Optional[str] = Query(None, description="'true' or 'false'"),
    email: Optional[str] = Query(None, description="Creator email; includes pending contests"),
    contestType: Optional[str] = Query(None, description="Contest type, or 'Others'"),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Get contests.

    Without email only approved contests are listed. With email the
    creator's own contests are listed, pending ones included.
    """
    contest_service = ContestService(db)
    contests = await contest_service.get_contests(
        is_pending=isPending,
        email=email,
        contest_type=contestType
    )
    return json_response(contests)


@router.get("/{contest_id}")
async def get_contest(
    contest_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Get contest details by ID"""
    contest_service = ContestService(db)
    contest = await contest_service.get_contest_by_id(contest_id)
    return json_response(contest)


@router.post("")
async def create_contest(
    contest_data: ContestCreate,
    current_user: TokenData = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Create a contest; it stays pending until an admin approves it"""
    contest_service = ContestService(db)
    result = await contest_service.create_contest(contest_data)
    return json_response(insert_result(result))


@router.patch("/approve/{contest_id}")
async def approve_contest(
    contest_id: str,
    admin: TokenData = Depends(get_admin_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Approve a pending contest (admin only)"""
    contest_service = ContestService(db)

    if not await contest_service.approve_contest(contest_id):
        return error_response(message="Failed to approve contest", status_code=400)

    return json_response({"message": "Contest approved successfully"})


@router.delete("/{contest_id}")
async def delete_contest(
    contest_id: str,
    current_user: TokenData = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Delete a contest (admin or the contest's creator)"""
    contest_service = ContestService(db)

    contest = await contest_service.get_contest_by_id(contest_id)
    if not contest:
        raise NotFoundError("Contest not found")

    if not ContestService.is_creator(contest, current_user.email):
        user_service = UserService(db)
        if not await user_service.is_admin(current_user.email):
            raise ForbiddenError()

    result = await contest_service.delete_contest(contest_id)
    return json_response(delete_result(result))
