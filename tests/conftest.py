"""Shared test fixtures."""

from datetime import timedelta
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from racing.database import Base, create_session_factory
from racing.models import Event, Race
from racing.repositories import EventRepository, RaceRepository

from tests.fixtures.factories import NOW, create_event, create_race, noop_seeder, persist


def create_memory_engine() -> AsyncEngine:
    """In-memory SQLite engine shared by every session."""
    return create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
        poolclass=StaticPool,
    )


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create in-memory SQLite engine with all tables."""
    engine = create_memory_engine()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def empty_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine without any tables."""
    engine = create_memory_engine()
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory over the test engine."""
    return create_session_factory(db_engine)


@pytest.fixture
def race_repo(session_factory) -> RaceRepository:
    """Race repository with a fixed clock and no seeding."""
    return RaceRepository(session_factory, seeder=noop_seeder, clock=lambda: NOW)


@pytest.fixture
def event_repo(session_factory) -> EventRepository:
    """Event repository with no seeding."""
    return EventRepository(session_factory, seeder=noop_seeder)


@pytest.fixture
async def example_races(session_factory) -> list[Race]:
    """Three races across two meetings, mixed visibility and start times."""
    races = [
        create_race(1, meeting_id=3, visible=True, advertised_start_time=NOW - timedelta(hours=1)),
        create_race(2, meeting_id=3, visible=False, advertised_start_time=NOW + timedelta(hours=1)),
        create_race(3, meeting_id=5, visible=True, advertised_start_time=NOW - timedelta(hours=2)),
    ]
    await persist(session_factory, *races)
    return races


@pytest.fixture
async def example_events(session_factory) -> list[Event]:
    """Events inserted out of start-time order."""
    events = [
        create_event(1, name="Geelong hawks vs Ballarat lions", advertised_start_time=NOW + timedelta(days=1)),
        create_event(2, name="Randwick storm vs Sandown ravens", advertised_start_time=NOW - timedelta(days=1)),
    ]
    await persist(session_factory, *events)
    return events
