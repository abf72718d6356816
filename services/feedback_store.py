"""
Feedback storage backends.

Both implementations share the FeedbackStore contract so the HTTP layer
does not care whether records live in process memory or in MongoDB.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from datetime import timezone
from uuid import uuid4
import logging
from beanie import PydanticObjectId
from beanie.exceptions import CollectionWasNotInitialized
from bson.errors import InvalidId
from pymongo.errors import PyMongoError
from database.models import Feedback, init_database, utc_now
from dto.feedback_dto import FeedbackRecord
from services.exceptions import StorageUnavailable, FeedbackNotFound
from config.variable import FEEDBACK_BACKEND

logger = logging.getLogger(__name__)


class FeedbackStore(ABC):
    """Create, list and delete feedback records"""

    @abstractmethod
    async def submit(self, user_name: Optional[str], content: str) -> FeedbackRecord:
        """Persist a new record with a fresh id and server-side timestamp"""

    @abstractmethod
    async def list_all(self) -> List[FeedbackRecord]:
        """Return every stored record, empty list when there are none"""

    @abstractmethod
    async def delete_by_id(self, feedback_id: str) -> None:
        """Remove one record, raising FeedbackNotFound when it does not exist"""


class InMemoryFeedbackStore(FeedbackStore):
    """Process-local store. Records are kept in insertion order."""

    def __init__(self):
        self._records: List[FeedbackRecord] = []

    async def submit(self, user_name: Optional[str], content: str) -> FeedbackRecord:
        record = FeedbackRecord(
            id=uuid4().hex,
            user_name=user_name,
            feedback=content,
            timestamp=utc_now()
        )
        self._records.append(record)
        return record

    async def list_all(self) -> List[FeedbackRecord]:
        return list(self._records)

    async def delete_by_id(self, feedback_id: str) -> None:
        for index, record in enumerate(self._records):
            if record.id == feedback_id:
                del self._records[index]
                return
        raise FeedbackNotFound(feedback_id)


class MongoFeedbackStore(FeedbackStore):
    """Store backed by the Beanie `Feedback` document collection.

    The collection is bound lazily: until `init_database()` succeeds every
    operation retries it and fails with StorageUnavailable, so the store
    recovers once MongoDB becomes reachable.
    """

    def __init__(self):
        self._initialized = False

    async def connect(self) -> bool:
        if not self._initialized:
            self._initialized = await init_database()
        return self._initialized

    async def _ensure_connected(self) -> None:
        if not await self.connect():
            raise StorageUnavailable("MongoDB is not reachable")

    @staticmethod
    def _to_record(document: Feedback) -> FeedbackRecord:
        timestamp = document.timestamp
        if timestamp.tzinfo is None:
            # BSON dates carry no offset; they are always stored as UTC
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return FeedbackRecord(
            id=str(document.id),
            user_name=document.user_name,
            feedback=document.feedback,
            timestamp=timestamp
        )

    async def submit(self, user_name: Optional[str], content: str) -> FeedbackRecord:
        await self._ensure_connected()
        try:
            document = Feedback(user_name=user_name, feedback=content)
            await document.insert()
        except (PyMongoError, CollectionWasNotInitialized) as e:
            logger.error("Failed to insert feedback: %s", e)
            raise StorageUnavailable("Could not save feedback") from e
        return self._to_record(document)

    async def list_all(self) -> List[FeedbackRecord]:
        await self._ensure_connected()
        try:
            documents = await Feedback.find_all().to_list()
        except (PyMongoError, CollectionWasNotInitialized) as e:
            logger.error("Failed to fetch feedback: %s", e)
            raise StorageUnavailable("Could not fetch feedback") from e
        return [self._to_record(document) for document in documents]

    async def delete_by_id(self, feedback_id: str) -> None:
        try:
            object_id = PydanticObjectId(feedback_id)
        except (InvalidId, TypeError):
            # Ids that are not ObjectIds cannot exist in the collection
            raise FeedbackNotFound(feedback_id)

        await self._ensure_connected()
        try:
            document = await Feedback.get(object_id)
            if not document:
                raise FeedbackNotFound(feedback_id)
            await document.delete()
        except (PyMongoError, CollectionWasNotInitialized) as e:
            logger.error("Failed to delete feedback %s: %s", feedback_id, e)
            raise StorageUnavailable("Could not delete feedback") from e


def build_feedback_store(backend: str = FEEDBACK_BACKEND) -> FeedbackStore:
    """Pick the store implementation named by FEEDBACK_BACKEND"""
    if backend == "mongo":
        return MongoFeedbackStore()
    if backend == "memory":
        return InMemoryFeedbackStore()
    raise ValueError(f"Unknown FEEDBACK_BACKEND: {backend!r}")
