from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from skillswap.auth.dependencies import CurrentUser, get_current_user
from skillswap.common.database.database import get_db_session
from skillswap.common.rate_limit import limiter
from skillswap.main import app
from skillswap.models.models import Base
from skillswap.modules.sessions import session_controller
from skillswap.modules.sessions.session_store import InMemorySessionStore


class RecordingDispatcher:
    def __init__(self):
        self.events = []

    async def dispatch(self, event_name, **kwargs):
        self.events.append((event_name, kwargs))


@pytest.fixture
def user():
    return CurrentUser(id=str(uuid4()), email="alex@example.com", name="Alex")


@pytest.fixture
def store():
    return InMemorySessionStore()


@pytest.fixture
def events(monkeypatch):
    recorder = RecordingDispatcher()
    monkeypatch.setattr(session_controller, "dispatcher", recorder)
    return recorder


@pytest.fixture
def client(user, store, events):
    async def no_db():
        yield None

    app.dependency_overrides[get_current_user] = lambda: user
    app.dependency_overrides[session_controller.get_session_store] = lambda: store
    app.dependency_overrides[get_db_session] = no_db
    limiter.enabled = False
    # No context manager: the lifespan would try to reach the database
    yield TestClient(app)
    limiter.enabled = True
    app.dependency_overrides.clear()


@pytest.fixture
async def db():
    """A fresh in-memory SQLite database with every table created."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()
