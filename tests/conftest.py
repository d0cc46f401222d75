"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from uuid import uuid4

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

# Set test environment before importing app modules
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["YOUTUBE_PROVIDER"] = "stub"
os.environ["YOUTUBE_API_KEY"] = "test-api-key"
os.environ["PROXY_URL"] = "http://testserver/functions/v1/youtube-api"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("COMPANION_USER_ID", None)

PROXY_URL = "http://testserver/functions/v1/youtube-api"
MISSING_VIDEO_ID = "missingVid0"
QUIET_VIDEO_ID = "quietVideo1"


@pytest.fixture(scope="session")
def test_client() -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI app."""
    from tube_companion.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def stub_adapter():
    """Stub YouTube adapter with one unknown video and one without comments."""
    from tube_companion.adapters.youtube.stub import StubYouTubeAdapter

    return StubYouTubeAdapter(missing={MISSING_VIDEO_ID}, without_comments={QUIET_VIDEO_ID})


@pytest.fixture
def proxy_app(stub_adapter):
    """The FastAPI app with the proxy wired to ``stub_adapter``."""
    from tube_companion.api.deps import get_adapter
    from tube_companion.main import app

    app.dependency_overrides[get_adapter] = lambda: stub_adapter
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def session_factory() -> Generator[sessionmaker[Session], None, None]:
    """Session factory bound to a fresh in-memory database."""
    from tube_companion.db.models import Base
    from tube_companion.db.session import build_engine

    engine = build_engine("sqlite://")
    Base.metadata.create_all(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def auth():
    """A signed-in session."""
    from tube_companion.services.auth import AuthSession

    session = AuthSession()
    session.sign_in(uuid4(), email="creator@example.com", access_token="test-token")
    return session


@pytest.fixture
def local_sink():
    from tube_companion.adapters.events.local import LocalBufferEventSink

    return LocalBufferEventSink(max_size=100)


@pytest.fixture
def events(session_factory, local_sink, auth):
    """Event logger writing to the test database with a local fallback."""
    from tube_companion.adapters.events.store import DatabaseEventSink
    from tube_companion.services.events import EventLogger

    return EventLogger(
        primary=DatabaseEventSink(session_factory),
        fallback=local_sink,
        auth=auth,
        user_agent="pytest-agent",
    )


@pytest.fixture
def store(auth, events, session_factory):
    from tube_companion.services.store import StoreClient

    return StoreClient(auth, events, session_factory=session_factory)


@pytest.fixture
def platform(events, auth, proxy_app):
    """Platform client talking to the in-process proxy."""
    from tube_companion.services.platform import PlatformClient

    client = httpx.AsyncClient(
        transport=httpx.ASGITransport(app=proxy_app),
        base_url="http://testserver",
    )
    return PlatformClient(events, auth=auth, proxy_url=PROXY_URL, client=client)


@pytest.fixture
def dashboard(store, platform, events):
    from tube_companion.services.dashboard import Dashboard

    return Dashboard(store, platform, events)
