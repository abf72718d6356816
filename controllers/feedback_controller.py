from fastapi import HTTPException, status
from typing import Optional, List
import logging
from dto.feedback_dto import FeedbackRecord, FeedbackSubmitResponse, MessageResponse
from services.feedback_store import FeedbackStore
from services.exceptions import StorageUnavailable, FeedbackNotFound

logger = logging.getLogger(__name__)

STORAGE_ERROR = "Error accessing feedback storage"


class FeedbackController:
    """Controller for the feedback mailbox"""

    def __init__(self, store: FeedbackStore):
        self.store = store

    async def submit_feedback(self, user_name: Optional[str], content: str) -> FeedbackSubmitResponse:
        try:
            record = await self.store.submit(user_name, content)
        except StorageUnavailable:
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=STORAGE_ERROR)
        logger.info("Stored feedback %s", record.id)
        return FeedbackSubmitResponse(message="Feedback submitted successfully", feedback=record)

    async def list_feedbacks(self) -> List[FeedbackRecord]:
        try:
            return await self.store.list_all()
        except StorageUnavailable:
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=STORAGE_ERROR)

    async def delete_feedback(self, feedback_id: str) -> MessageResponse:
        try:
            await self.store.delete_by_id(feedback_id)
        except FeedbackNotFound:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Feedback not found")
        except StorageUnavailable:
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=STORAGE_ERROR)
        logger.info("Deleted feedback %s", feedback_id)
        return MessageResponse(message="Feedback deleted successfully")
