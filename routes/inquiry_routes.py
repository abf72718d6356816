from fastapi import APIRouter, Depends, Request
from controllers.inquiry_controller import InquiryController
from dto.feedback_dto import MessageResponse
from dto.inquiry_dto import InquiryRequest

router = APIRouter(prefix="/api/inquiries", tags=["inquiries"])


def get_inquiry_controller(request: Request) -> InquiryController:
    return InquiryController(request.app.state.inquiry_notifier)


@router.post("", response_model=MessageResponse)
async def send_inquiry(
    inquiry: InquiryRequest,
    controller: InquiryController = Depends(get_inquiry_controller)
):
    """
    Validate a fund or stock file request and email it for approval
    """
    return await controller.send_inquiry(inquiry)
