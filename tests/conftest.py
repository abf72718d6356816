"""
Shared fixtures: an app wired to an in-memory store and a fake mail transport.
"""
import pytest
from fastapi.testclient import TestClient

from main import create_app
from services.exceptions import MailDeliveryError
from services.feedback_store import InMemoryFeedbackStore


class FakeMailTransport:
    """Records every message; fails on demand"""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []
        self.attempts = 0

    async def send(self, message):
        self.attempts += 1
        if self.fail:
            raise MailDeliveryError("smtp down")
        self.sent.append(message)


@pytest.fixture
def store():
    return InMemoryFeedbackStore()


@pytest.fixture
def transport():
    return FakeMailTransport()


@pytest.fixture
def client(store, transport):
    app = create_app(feedback_store=store, mail_transport=transport)
    with TestClient(app) as test_client:
        yield test_client
