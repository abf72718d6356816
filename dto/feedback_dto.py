from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class FeedbackCreateRequest(BaseModel):
    """Request model for creating feedback"""
    model_config = ConfigDict(populate_by_name=True)

    user_name: Optional[str] = Field(None, alias="userName", description="Author name, free text")
    feedback: str = Field(..., description="Feedback message")


class FeedbackRecord(BaseModel):
    """A stored feedback entry, serialized with the document store's field names"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    user_name: Optional[str] = Field(None, alias="userName")
    feedback: str
    timestamp: datetime


class FeedbackSubmitResponse(BaseModel):
    message: str
    feedback: FeedbackRecord


class MessageResponse(BaseModel):
    message: str
