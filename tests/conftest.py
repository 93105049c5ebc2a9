"""
Shared fixtures: in-memory SQLite, in-memory session store and a recording
mailer, so the whole app runs without Postgres, Redis or SMTP.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SESSION_BACKEND"] = "memory"
os.environ["MAIL_BACKEND"] = "console"
os.environ["SESSION_SECRET"] = "test-secret"
os.environ["COOKIE_SECURE"] = "false"
os.environ["COOKIE_SAMESITE"] = "lax"

import pytest
from fastapi.testclient import TestClient

import telemart.data.models  # noqa: F401
from telemart.api.deps import get_mailer, get_session_store
from telemart.data.database import Base, SessionLocal, engine
from telemart.domain.errors import DependencyFailure
from telemart.main import app
from telemart.services.mail_service import Mailer
from telemart.services.session_service import MemorySessionStore


class RecordingMailer(Mailer):
    """Collects sent messages; set `fail = True` to simulate an SMTP outage."""

    def __init__(self):
        self.sent = []
        self.fail = False

    def send(self, to: str, subject: str, body: str) -> None:
        if self.fail:
            raise DependencyFailure("Failed to send cart email")
        self.sent.append({"to": to, "subject": subject, "body": body})


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture
def session_store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture
def test_client(mailer, session_store):
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_session_store] = lambda: session_store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def other_client(test_client):
    """Second browser: separate cookie jar, same app and stores."""
    return TestClient(app)

