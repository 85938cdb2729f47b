"""Event service."""

from racing.repositories import EventRepository
from racing.schemas import EventListResponse


class EventService:
    """Service for sports event operations."""

    def __init__(self, event_repo: EventRepository):
        self.event_repo = event_repo

    async def list_events(self) -> EventListResponse:
        """List all events."""
        events = await self.event_repo.list()
        return EventListResponse(events=events)
