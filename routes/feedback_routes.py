from fastapi import APIRouter, Depends, Request, status
from typing import List
from controllers.feedback_controller import FeedbackController
from dto.feedback_dto import FeedbackCreateRequest, FeedbackRecord, FeedbackSubmitResponse, MessageResponse

router = APIRouter(prefix="/api", tags=["feedback"])


def get_feedback_controller(request: Request) -> FeedbackController:
    """Build the controller around the store the app was created with"""
    return FeedbackController(request.app.state.feedback_store)


@router.post("/feedback", response_model=FeedbackSubmitResponse, status_code=status.HTTP_201_CREATED)
async def submit_feedback(
    feedback_data: FeedbackCreateRequest,
    controller: FeedbackController = Depends(get_feedback_controller)
):
    """
    Submit a feedback entry
    """
    return await controller.submit_feedback(feedback_data.user_name, feedback_data.feedback)


@router.get("/feedbacks", response_model=List[FeedbackRecord])
async def list_feedbacks(controller: FeedbackController = Depends(get_feedback_controller)):
    """List every stored feedback entry"""
    return await controller.list_feedbacks()


@router.delete("/feedback/{feedback_id}", response_model=MessageResponse)
async def delete_feedback(
    feedback_id: str,
    controller: FeedbackController = Depends(get_feedback_controller)
):
    return await controller.delete_feedback(feedback_id)
