"""
Pytest fixtures for test database, client, and seeded events.

Each test gets a fresh in-memory SQLite database (aiosqlite + StaticPool so
every session shares the one connection). The app uses the same Database
handle it would build in its lifespan, so requests run the real get_db path.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from eventhub.main import app
from eventhub.db.base import Base
from eventhub.db.session import Database
from eventhub.models.event import Event
from eventhub.schemas.event import EventCreate
from eventhub.services.event_service import create_event
from eventhub.stores import SQLAlchemyRecordStore

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def event_payload() -> dict:
    """A complete, valid event submission."""
    return {
        "title": "My Dev Talk!!",
        "description": "An evening of talks about developer tooling.",
        "overview": "Three speakers, one theme: shipping faster.",
        "image": "https://example.com/images/dev-talk.png",
        "venue": "Main Hall",
        "location": "Jakarta, Indonesia",
        "date": "2025-01-31",
        "time": "2:30 PM",
        "mode": "offline",
        "audience": "Developers",
        "agenda": ["Doors open", "Keynote", "Panel", "Networking"],
        "organizer": "Dev Community ID",
        "tags": ["python", "tooling"],
    }


@pytest_asyncio.fixture(scope="function")
async def database() -> AsyncGenerator[Database, None]:
    """Create tables, yield the handle, then drop tables for isolation."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    db = Database(engine)
    yield db

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def store(db_session: AsyncSession) -> SQLAlchemyRecordStore:
    return SQLAlchemyRecordStore(db_session)


@pytest_asyncio.fixture(scope="function")
async def client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client running against the test database."""
    app.state.database = database

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    del app.state.database


@pytest_asyncio.fixture
async def test_event(database: Database, event_payload: dict) -> Event:
    """A committed event created through the service layer."""
    async with database.session() as session:
        event = await create_event(SQLAlchemyRecordStore(session), EventCreate(**event_payload))
    return event
