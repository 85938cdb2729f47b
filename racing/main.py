"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from racing.api import events_router, races_router
from racing.config import get_settings
from racing.database import create_engine_from_settings, create_session_factory
from racing.exceptions import RepositoryError
from racing.repositories import EventRepository, RaceRepository

settings = get_settings()


def configure_logging(level: str) -> None:
    """Log to stdout at the named level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    engine = create_engine_from_settings()
    try:
        session_factory = create_session_factory(engine)

        app.state.race_repository = RaceRepository(session_factory)
        app.state.event_repository = EventRepository(session_factory)

        await app.state.race_repository.init()
        await app.state.event_repository.init()
        logger.info("Repositories ready")

        yield
    finally:
        # Shutdown
        await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Race and sports event listing service",
    lifespan=lifespan,
)


@app.exception_handler(RepositoryError)
async def repository_error_handler(request: Request, exc: RepositoryError):
    """Report data access failures without leaking internals."""
    logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Data access failed"})


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# Register API routers
app.include_router(races_router, prefix="/api")
app.include_router(events_router, prefix="/api")
