"""Shared fixtures for API integration tests."""

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from racing.api.deps import get_event_service, get_race_service
from racing.main import app
from racing.services import EventService, RaceService


@pytest.fixture(scope="function")
async def client(race_repo, event_repo) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client wired to the test repositories."""
    app.dependency_overrides[get_race_service] = lambda: RaceService(race_repo)
    app.dependency_overrides[get_event_service] = lambda: EventService(event_repo)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clean up overrides
    app.dependency_overrides.pop(get_race_service, None)
    app.dependency_overrides.pop(get_event_service, None)
