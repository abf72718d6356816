from dto.feedback_dto import FeedbackCreateRequest, FeedbackRecord, FeedbackSubmitResponse, MessageResponse
from dto.inquiry_dto import InquiryRequest
