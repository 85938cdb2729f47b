"""Event schemas."""

from datetime import datetime

from racing.schemas.common import BaseSchema


class EventResponse(BaseSchema):
    """Sports event record."""

    id: int
    name: str
    advertised_start_time: datetime


class EventListResponse(BaseSchema):
    """Event list response schema."""

    events: list[EventResponse]
