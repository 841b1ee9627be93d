from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Optional, List, Dict
from contestpro.database import CONTESTS_COLLECTION
from contestpro.models.contest.contest import ContestCreate
from contestpro.services.contest.queries import build_contest_query
from contestpro.utils.ids import to_object_id


class ContestService:
    """Service for contest operations"""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.contests = db[CONTESTS_COLLECTION]

    async def get_contests(
        self,
        is_pending: Optional[str] = None,
        email: Optional[str] = None,
        contest_type: Optional[str] = None
    ) -> List[Dict]:
        """
        Get contests visible for the given filters.

        Visibility:
        - default: approved contests only
        - email: the creator's contests, pending included
        """
        query = build_contest_query(
            is_pending=is_pending,
            email=email,
            contest_type=contest_type
        )
        return await self.contests.find(query).to_list(length=None)

    async def get_contest_by_id(self, contest_id: str) -> Optional[Dict]:
        """Get contest by ID"""
        return await self.contests.find_one({"_id": to_object_id(contest_id)})

    async def create_contest(self, contest_data: ContestCreate):
        """Store a new contest"""
        document = contest_data.model_dump(mode="json")
        return await self.contests.insert_one(document)

    async def approve_contest(self, contest_id: str) -> bool:
        """Flip a contest to approved; False when nothing changed"""
        result = await self.contests.update_one(
            {"_id": to_object_id(contest_id)},
            {"$set": {"isPending": False}}
        )
        if result.modified_count > 0:
            print(f"[ADMIN] Approved contest {contest_id}")
            return True
        return False

    async def delete_contest(self, contest_id: str):
        """Remove a contest"""
        result = await self.contests.delete_one({"_id": to_object_id(contest_id)})
        print(f"[ADMIN] Deleted contest {contest_id} ({result.deleted_count} removed)")
        return result

    @staticmethod
    def is_creator(contest: Dict, email: str) -> bool:
        """Check whether email belongs to the contest creator"""
        creator = contest.get("creator") or {}
        return creator.get("email") == email
