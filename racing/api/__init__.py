"""API routers."""

from racing.api.events import router as events_router
from racing.api.races import router as races_router

__all__ = [
    "races_router",
    "events_router",
]
