from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Optional, List, Dict
from pymongo.errors import DuplicateKeyError
from contestpro.database import PARTICIPANTS_COLLECTION
from contestpro.models.contest.participation import ParticipationCreate, ParticipationStats
from contestpro.services.contest.queries import (
    build_participation_query,
    build_existing_winner_query
)
from contestpro.core.exceptions import NotFoundError, WinnerAlreadyDeclaredError
from contestpro.utils.ids import to_object_id


class ParticipationService:
    """Service for contest entries and winner selection"""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.participants = db[PARTICIPANTS_COLLECTION]

    async def query_participations(
        self,
        creator: Optional[str] = None,
        contest_title: Optional[str] = None,
        participant: Optional[str] = None,
        winner: Optional[str] = None
    ) -> List[Dict]:
        """Run the participation listing selected by the query parameters"""
        query = build_participation_query(
            creator=creator,
            contest_title=contest_title,
            participant=participant,
            winner=winner
        )

        if query.is_aggregation:
            cursor = self.participants.aggregate(query.pipeline)
            return await cursor.to_list(length=None)

        return await self.participants.find(query.filter).to_list(length=None)

    async def get_participations_by_email(self, email: Optional[str]) -> List[Dict]:
        """Get a participant's entries"""
        return await self.participants.find({"participant_email": email}).to_list(length=None)

    async def get_stats(self) -> ParticipationStats:
        """Totals and full lists of participations and winners"""
        participants = await self.participants.find({}).to_list(length=None)
        winners = [p for p in participants if p.get("isWinner") is True]

        return ParticipationStats(
            totalParticipants=len(participants),
            totalWinners=len(winners),
            participants=participants,
            winners=winners
        )

    async def create_participation(self, participation_data: ParticipationCreate):
        """Store a paid entry"""
        document = participation_data.model_dump(mode="json")
        return await self.participants.insert_one(document)

    async def declare_winner(self, participation_id: str):
        """
        Mark a participation as its contest's winner.

        Raises WinnerAlreadyDeclaredError if the contest already has one. The
        unique partial index on (contest_title, isWinner=true) rejects a second
        winner written by a concurrent request between the check and the set.
        """
        object_id = to_object_id(participation_id)

        participation = await self.participants.find_one({"_id": object_id})
        if not participation:
            raise NotFoundError("Participation not found")

        contest_title = participation.get("contest_title")
        existing_winner = await self.participants.find_one(
            build_existing_winner_query(contest_title)
        )
        if existing_winner:
            raise WinnerAlreadyDeclaredError()

        try:
            result = await self.participants.update_one(
                {"_id": object_id},
                {"$set": {"isWinner": True}}
            )
        except DuplicateKeyError:
            raise WinnerAlreadyDeclaredError()

        print(f"[ADMIN] Declared participation {participation_id} winner of '{contest_title}'")
        return result
