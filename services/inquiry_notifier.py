"""
Validates fund/stock file requests and emails the approver.
"""
import logging
from html import escape
from typing import Optional, Protocol
from dto.inquiry_dto import InquiryRequest
from services.mailer import MailMessage
from services.exceptions import InquiryValidationError, NotificationFailed, MailDeliveryError
from config.variable import INQUIRY_RECIPIENT, GMAIL_USER, APPROVE_REQUEST_URL

logger = logging.getLogger(__name__)

# type -> (label used in the mail, request attribute holding the name)
INQUIRY_TYPES = {
    "fund": ("Fund", "fund_name"),
    "stock": ("Stock", "stock_name"),
}

APPROVE_BUTTON_STYLE = (
    "background-color: #4CAF50; color: white; padding: 12px 20px; text-align: center; "
    "text-decoration: none; display: inline-block; border-radius: 4px;"
)


class MailTransport(Protocol):
    async def send(self, message: MailMessage) -> None: ...


def _present(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


class InquiryNotifier:
    """Turns a valid inquiry into a single notification email"""

    def __init__(
        self,
        transport: MailTransport,
        recipient: str = INQUIRY_RECIPIENT,
        sender: str = GMAIL_USER,
        approve_url: str = APPROVE_REQUEST_URL
    ):
        self.transport = transport
        self.recipient = recipient
        self.sender = sender
        self.approve_url = approve_url

    def validate(self, request: InquiryRequest) -> None:
        """Raise InquiryValidationError unless every field the type needs is present"""
        if request.type not in INQUIRY_TYPES:
            raise InquiryValidationError("Invalid inquiry type")

        _, name_field = INQUIRY_TYPES[request.type]
        required = (getattr(request, name_field), request.isin, request.sedol_or_ticker)
        if not all(_present(value) for value in required):
            raise InquiryValidationError(f"Missing required fields for {request.type} inquiry")

    def build_message(self, request: InquiryRequest) -> MailMessage:
        label, name_field = INQUIRY_TYPES[request.type]
        html = f"""
            <p>{label} Name: {escape(getattr(request, name_field))}</p>
            <p>ISIN: {escape(request.isin)}</p>
            <p>SEDOL or Ticker: {escape(request.sedol_or_ticker)}</p>
            <p>Click the button below to approve the request:</p>
            <a href="{escape(self.approve_url)}" style="{APPROVE_BUTTON_STYLE}">Approve Request</a>
        """
        return MailMessage(
            sender=self.sender,
            recipient=self.recipient,
            subject=f"You have Received a {label} File request",
            html=html
        )

    async def submit(self, request: InquiryRequest) -> str:
        """
        Validate, then make exactly one delivery attempt.
        Returns the success message for the caller.
        """
        logger.info("Received %s request with data: %s", request.type, request.model_dump(by_alias=True))
        self.validate(request)

        message = self.build_message(request)
        try:
            await self.transport.send(message)
        except MailDeliveryError as e:
            logger.exception("Error sending email for %s inquiry", request.type)
            raise NotificationFailed("Error sending email") from e
        return "Inquiry sent successfully"
