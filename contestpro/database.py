import os
from motor.motor_asyncio import AsyncIOMotorClient
from typing import Optional
from dotenv import load_dotenv
from pymongo import ASCENDING

# Load environment variables
load_dotenv()

# Collection names used by the deployed database
USERS_COLLECTION = "userCollection"
CONTESTS_COLLECTION = "contestsCollection"
PARTICIPANTS_COLLECTION = "participantCollection"


def build_mongodb_url() -> str:
    """Resolve the MongoDB connection string from the environment"""
    mongodb_url = os.getenv("MONGODB_URL")
    if mongodb_url:
        return mongodb_url

    db_user = os.getenv("DB_USER")
    db_password = os.getenv("DB_PASSWORD")
    if db_user and db_password:
        cluster_host = os.getenv("DB_CLUSTER_HOST", "cluster0.mongodb.net")
        return (
            f"mongodb+srv://{db_user}:{db_password}@{cluster_host}/"
            "?retryWrites=true&w=majority&appName=Cluster0"
        )

    return "mongodb://localhost:27017"


class Database:
    client: Optional[AsyncIOMotorClient] = None

    @classmethod
    async def connect_db(cls):
        """Connect to MongoDB"""
        cls.client = AsyncIOMotorClient(build_mongodb_url())
        print("[OK] Connected to MongoDB")

        # Confirm the deployment answers before serving requests
        await cls.client.admin.command("ping")
        print("[OK] Pinged your deployment. You successfully connected to MongoDB!")

        # Create indexes
        await cls.create_indexes()

    @classmethod
    async def create_indexes(cls):
        """Create database indexes"""
        db = cls.get_db()

        # Users: one document per email
        try:
            await db[USERS_COLLECTION].create_index([("email", ASCENDING)], unique=True)
            print(f"[OK] Created unique index on {USERS_COLLECTION}.email")
        except Exception as e:
            print(f"[WARN] Index on {USERS_COLLECTION}.email may already exist: {e}")

        # Participations: at most one winner per contest title
        try:
            await db[PARTICIPANTS_COLLECTION].create_index(
                [("contest_title", ASCENDING)],
                unique=True,
                partialFilterExpression={"isWinner": True},
                name="one_winner_per_contest"
            )
            print(f"[OK] Created winner index on {PARTICIPANTS_COLLECTION}.contest_title")
        except Exception as e:
            print(f"[WARN] Winner index on {PARTICIPANTS_COLLECTION} may already exist: {e}")

        # Participation lookups
        try:
            await db[PARTICIPANTS_COLLECTION].create_index([("participant_email", ASCENDING)])
            await db[PARTICIPANTS_COLLECTION].create_index([("creator_email", ASCENDING)])
            print(f"[OK] Created lookup indexes on {PARTICIPANTS_COLLECTION}")
        except Exception as e:
            print(f"[WARN] Lookup indexes on {PARTICIPANTS_COLLECTION} may already exist: {e}")

    @classmethod
    async def close_db(cls):
        """Close MongoDB connection"""
        if cls.client:
            cls.client.close()
            cls.client = None
            print("[OK] Disconnected from MongoDB")

    @classmethod
    def get_db(cls):
        """Get database instance"""
        database_name = os.getenv("DATABASE_NAME", "contestPro")
        return cls.client[database_name]


async def get_database():
    """Dependency to get database"""
    return Database.get_db()
