from beanie import Document, init_beanie
from pydantic import Field
from typing import Optional
from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError
import logging
from config.variable import MONGODB_URI, DATABASE_NAME

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Feedback(Document):
    """Feedback collection for storing mailbox comments"""
    user_name: Optional[str] = Field(None, description="Author supplied name, not validated")
    feedback: str = Field(..., description="Feedback body")
    timestamp: datetime = Field(default_factory=utc_now)

    class Settings:
        name = "feedbacks"
        indexes = ["timestamp"]


async def init_database() -> bool:
    """Initialize MongoDB connection and Beanie.

    A failed connection is logged and reported as False so the server can
    still start; MongoFeedbackStore calls this again on its next operation.
    """
    try:
        client = AsyncIOMotorClient(MONGODB_URI, serverSelectionTimeoutMS=5000, tz_aware=True)
        await init_beanie(
            database=client[DATABASE_NAME],
            document_models=[Feedback]
        )
    except PyMongoError:
        logger.exception("Could not connect to MongoDB at %s", MONGODB_URI)
        return False
    logger.info("Connected to MongoDB: %s", DATABASE_NAME)
    return True
