from fastapi import APIRouter, Depends, Query
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorDatabase

from contestpro.database import get_database
from contestpro.models.contest.participation import ParticipationCreate
from contestpro.services.contest.participation import ParticipationService
from contestpro.utils.response import json_response, insert_result, update_result

router = APIRouter(tags=["Participants"])


@router.get("/participants")
async def get_participants(
    creator: Optional[str] = Query(None, description="Creator email; one summary row per contest"),
    contest_title: Optional[str] = Query(None, description="Participant email"),
    participant: Optional[str] = Query(None, description="Participant email"),
    winner: Optional[str] = Query(None, description="Only winning entries when set"),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    List participations.

    The first parameter present decides the listing:
    - creator: contests of this creator that received entries
    - contest_title: entries of the participant with this email
    - participant (+ winner): entries of this participant, optionally winning ones only
    """
    participation_service = ParticipationService(db)
    participations = await participation_service.query_participations(
        creator=creator,
        contest_title=contest_title,
        participant=participant,
        winner=winner
    )
    return json_response(participations)


@router.get("/participants/stats")
async def get_participant_stats(
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Totals of participations and winners with the full lists"""
    participation_service = ParticipationService(db)
    stats = await participation_service.get_stats()
    return json_response(stats.model_dump())


@router.post("/participants")
async def create_participant(
    participation_data: ParticipationCreate,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Record a paid contest entry"""
    participation_service = ParticipationService(db)
    result = await participation_service.create_participation(participation_data)
    return json_response(insert_result(result))


@router.patch("/participants/{participation_id}")
async def declare_winner(
    participation_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Declare this entry the winner of its contest"""
    participation_service = ParticipationService(db)
    result = await participation_service.declare_winner(participation_id)
    return json_response(update_result(result))


@router.get("/myParticipations")
async def get_my_participations(
    email: Optional[str] = Query(None),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Entries of the participant with this email"""
    participation_service = ParticipationService(db)
    participations = await participation_service.get_participations_by_email(email)
    return json_response(participations)
