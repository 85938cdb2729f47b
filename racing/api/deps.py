"""Shared API dependencies."""

from fastapi import Request

from racing.services import EventService, RaceService


def get_race_service(request: Request) -> RaceService:
    """Race service over the application's race repository."""
    return RaceService(request.app.state.race_repository)


def get_event_service(request: Request) -> EventService:
    """Event service over the application's event repository."""
    return EventService(request.app.state.event_repository)
