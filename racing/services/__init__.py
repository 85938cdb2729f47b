"""Business logic services."""

from racing.services.event_service import EventService
from racing.services.race_service import RaceService

__all__ = [
    "RaceService",
    "EventService",
]
