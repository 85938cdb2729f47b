"""Event repository."""

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from racing.exceptions import RowDecodeError
from racing.models import Event
from racing.repositories.base import BaseRepository, Seeder, to_utc
from racing.schemas import EventResponse
from racing.seed import seed_events


def scan_event(row: Sequence[Any]) -> EventResponse:
    """Materialize one events row into an EventResponse."""
    try:
        event_id, name, advertised_start = row
    except (TypeError, ValueError) as exc:
        raise RowDecodeError(f"malformed events row: {exc}") from exc

    try:
        return EventResponse(
            id=event_id,
            name=name,
            advertised_start_time=to_utc(advertised_start),
        )
    except ValidationError as exc:
        raise RowDecodeError(f"malformed events row {event_id!r}: {exc}") from exc


class EventRepository(BaseRepository[Event]):
    """Read-only repository for sports events."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        seeder: Seeder = seed_events,
    ):
        super().__init__(Event, session_factory, seeder)

    async def list(self) -> list[EventResponse]:
        """List all events in store order."""
        rows = await self._fetch_all(
            select(Event.id, Event.name, Event.advertised_start_time)
        )
        return [scan_event(row) for row in rows]
