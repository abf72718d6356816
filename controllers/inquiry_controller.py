from fastapi import HTTPException, status
from dto.feedback_dto import MessageResponse
from dto.inquiry_dto import InquiryRequest
from services.inquiry_notifier import InquiryNotifier
from services.exceptions import InquiryValidationError, NotificationFailed


class InquiryController:
    def __init__(self, notifier: InquiryNotifier):
        self.notifier = notifier

    async def send_inquiry(self, request: InquiryRequest) -> MessageResponse:
        """Map notifier outcomes to 200 / 400 / 500"""
        try:
            message = await self.notifier.submit(request)
        except InquiryValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
        except NotificationFailed as e:
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)
        return MessageResponse(message=message)
