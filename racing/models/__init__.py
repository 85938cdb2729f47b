"""SQLAlchemy models."""

from racing.models.event import Event
from racing.models.race import Race

__all__ = [
    "Race",
    "Event",
]
