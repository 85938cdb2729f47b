"""Pydantic schemas."""

from racing.schemas.common import BaseSchema, RaceStatusEnum
from racing.schemas.event import EventListResponse, EventResponse
from racing.schemas.race import ListRacesFilter, RaceListResponse, RaceResponse

__all__ = [
    # Common
    "BaseSchema",
    "RaceStatusEnum",
    # Race
    "ListRacesFilter",
    "RaceResponse",
    "RaceListResponse",
    # Event
    "EventResponse",
    "EventListResponse",
]
