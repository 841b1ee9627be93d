from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Optional, Dict, List, Tuple
from bson import ObjectId
from pymongo.errors import DuplicateKeyError
from contestpro.database import USERS_COLLECTION
from contestpro.models.auth.user import UserCreate, UserRole
from contestpro.utils.ids import to_object_id


class UserService:
    """Service for user accounts and roles"""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.users_collection = db[USERS_COLLECTION]

    async def get_users(self) -> List[Dict]:
        """Get every user"""
        return await self.users_collection.find({}).to_list(length=None)

    async def get_user_by_email(self, email: str) -> Optional[Dict]:
        """Get user by email"""
        return await self.users_collection.find_one({"email": email})

    async def get_role(self, email: str) -> Optional[Dict]:
        """Get the {_id, role} projection of a user"""
        return await self.users_collection.find_one(
            {"email": email},
            {"_id": 1, "role": 1}
        )

    async def is_admin(self, email: str) -> bool:
        """Check whether the user with this email holds the admin role"""
        user = await self.get_user_by_email(email)
        return bool(user) and user.get("role") == UserRole.ADMIN.value

    async def create_user(self, user_data: UserCreate) -> Tuple[bool, Optional[ObjectId]]:
        """
        Create a user unless one with the same email exists.

        Returns (created, inserted_id). A concurrent insert of the same email
        is caught by the unique index and reported as already existing.
        """
        existing_user = await self.get_user_by_email(user_data.email)
        if existing_user:
            return False, None

        document = user_data.model_dump(mode="json", exclude_none=True)
        # Roles only change through the admin endpoint
        document["role"] = UserRole.USER.value
        try:
            result = await self.users_collection.insert_one(document)
        except DuplicateKeyError:
            return False, None

        return True, result.inserted_id

    async def delete_user(self, user_id: str):
        """Remove a user by id"""
        result = await self.users_collection.delete_one({"_id": to_object_id(user_id)})
        print(f"[ADMIN] Deleted user {user_id} ({result.deleted_count} removed)")
        return result

    async def update_role(self, user_id: str, role: Optional[str]):
        """Set a user's role"""
        result = await self.users_collection.update_one(
            {"_id": to_object_id(user_id)},
            {"$set": {"role": role}}
        )
        print(f"[ADMIN] Set role of user {user_id} to {role}")
        return result
