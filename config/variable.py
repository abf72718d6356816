from dotenv import load_dotenv
import os
load_dotenv()

MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
DATABASE_NAME = os.getenv("DATABASE_NAME", "InquiryMailboxDB")
FEEDBACK_BACKEND = os.getenv("FEEDBACK_BACKEND", "memory").lower()

GMAIL_USER = os.getenv("GMAIL_USER", "")
GMAIL_PASS = os.getenv("GMAIL_PASS", "")
SMTP_HOST = os.getenv("SMTP_HOST", "smtp.gmail.com")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
INQUIRY_RECIPIENT = os.getenv("INQUIRY_RECIPIENT", GMAIL_USER)
APPROVE_REQUEST_URL = os.getenv("APPROVE_REQUEST_URL", "https://your-website.com/approve-request")

PORT = int(os.getenv("PORT", "3000"))
ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
