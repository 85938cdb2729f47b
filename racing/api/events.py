"""Event API routes."""

from fastapi import APIRouter, Depends

from racing.api.deps import get_event_service
from racing.schemas import EventListResponse
from racing.services import EventService

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=EventListResponse)
async def list_events(service: EventService = Depends(get_event_service)):
    """List all events."""
    return await service.list_events()
