from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
import uvicorn
import logging
from contextlib import asynccontextmanager
from typing import Optional

from config.variable import ALLOWED_ORIGINS, LOG_LEVEL, PORT
from middleware.errors import register_exception_handlers
from middleware.headers import add_permissions_policy
from routes import feedback_routes, inquiry_routes
from services.feedback_store import FeedbackStore, MongoFeedbackStore, build_feedback_store
from services.inquiry_notifier import InquiryNotifier, MailTransport
from services.mailer import SmtpMailTransport

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(
    feedback_store: Optional[FeedbackStore] = None,
    mail_transport: Optional[MailTransport] = None
) -> FastAPI:
    """Build the API around the given collaborators, defaulting to the configured ones"""
    store = feedback_store if feedback_store is not None else build_feedback_store()
    transport = mail_transport if mail_transport is not None else SmtpMailTransport()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events"""
        if isinstance(store, MongoFeedbackStore):
            # A failed connection is logged inside; the store retries on each request
            await store.connect()
        logger.info("Inquiry mailbox API started with %s", type(store).__name__)
        yield
        logger.info("Shutting down inquiry mailbox API")

    app = FastAPI(title="Inquiry Mailbox API", version="0.1.0", lifespan=lifespan)
    app.state.feedback_store = store
    app.state.inquiry_notifier = InquiryNotifier(transport)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(add_permissions_policy)
    register_exception_handlers(app)

    app.include_router(feedback_routes.router)
    app.include_router(inquiry_routes.router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Welcome to the backend server!"

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=PORT)
