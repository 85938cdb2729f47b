"""Data access repositories."""

from racing.repositories.base import BaseRepository, InitGuard, InitState
from racing.repositories.event_repository import EventRepository
from racing.repositories.filters import CompiledFilter, compile_race_filter
from racing.repositories.race_repository import RaceRepository

__all__ = [
    "BaseRepository",
    "InitGuard",
    "InitState",
    "CompiledFilter",
    "compile_race_filter",
    "RaceRepository",
    "EventRepository",
]
