"""
SMTP mail transport used to deliver inquiry notifications.

Sending is a single attempt. smtplib blocks, so the actual delivery runs in
the threadpool and the caller awaits the outcome.
"""
import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from fastapi.concurrency import run_in_threadpool
from config.variable import SMTP_HOST, SMTP_PORT, GMAIL_USER, GMAIL_PASS
from services.exceptions import MailDeliveryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MailMessage:
    sender: str
    recipient: str
    subject: str
    html: str


class SmtpMailTransport:
    """Sends HTML mail through an authenticated STARTTLS SMTP server"""

    def __init__(
        self,
        host: str = SMTP_HOST,
        port: int = SMTP_PORT,
        username: str = GMAIL_USER,
        password: str = GMAIL_PASS,
        timeout: float = 30.0
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.timeout = timeout

    def _build_email(self, message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["Subject"] = message.subject
        email["From"] = message.sender
        email["To"] = message.recipient
        email.set_content(message.html, subtype="html")
        return email

    def _deliver(self, email: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            server.starttls()
            server.login(self.username, self.password)
            server.send_message(email)

    async def send(self, message: MailMessage) -> None:
        """Deliver one message, raising MailDeliveryError on any failure"""
        if not self.username or not self.password:
            raise MailDeliveryError("GMAIL_USER and GMAIL_PASS must be set to send mail")
        if not message.recipient:
            raise MailDeliveryError("No recipient configured")

        try:
            email = self._build_email(message)
            await run_in_threadpool(self._deliver, email)
        except (smtplib.SMTPException, OSError, ValueError) as e:
            # ValueError covers UnicodeEncodeError from non-ASCII credentials or addresses
            raise MailDeliveryError(str(e)) from e
        logger.info("Email sent to %s: %s", message.recipient, message.subject)
