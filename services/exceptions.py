"""
Domain errors raised by the feedback store, the mail transport and the
inquiry notifier. Controllers translate them into HTTP responses.
"""


class FeedbackStoreError(Exception):
    """Base class for feedback store failures"""


class StorageUnavailable(FeedbackStoreError):
    """The persistence collaborator could not be reached or failed"""


class FeedbackNotFound(FeedbackStoreError):
    def __init__(self, feedback_id: str):
        super().__init__(f"Feedback {feedback_id} not found")
        self.feedback_id = feedback_id


class MailDeliveryError(Exception):
    """The mail transport could not hand the message over"""


class InquiryError(Exception):
    """Base class for inquiry failures"""


class InquiryValidationError(InquiryError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotificationFailed(InquiryError):
    def __init__(self, message: str = "Error sending email"):
        super().__init__(message)
        self.message = message
