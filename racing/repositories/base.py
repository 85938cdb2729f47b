"""Base repository with one-shot seeding and shared query execution."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, TypeVar

from sqlalchemy import Row, Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from racing.database import Base
from racing.exceptions import (
    InitializationError,
    QueryExecutionError,
    RowDecodeError,
    TimestampConversionError,
)

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)

Seeder = Callable[[AsyncSession], Awaitable[None]]
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(value: Any) -> datetime:
    """
    Convert a stored timestamp to an aware UTC datetime.

    Naive values are taken to be UTC, which is how they are written. Aware
    values keep their absolute instant, not their wall-clock fields.

    Raises:
        RowDecodeError: value is missing or not a datetime
        TimestampConversionError: value cannot be represented in UTC
    """
    if not isinstance(value, datetime):
        raise RowDecodeError(
            f"expected datetime, got {type(value).__name__}"
        )
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError as exc:
        raise TimestampConversionError(f"timestamp out of range: {value!r}") from exc


class InitState(str, Enum):
    """Lifecycle of a one-shot initialisation."""

    UNINITIALIZED = "UNINITIALIZED"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class InitGuard:
    """
    Runs a fallible async action exactly once.

    Concurrent callers wait for the running action and then observe its
    outcome. A failure is kept: every later call raises the same
    InitializationError and the action is never retried.
    """

    def __init__(self, name: str):
        self.name = name
        self._state = InitState.UNINITIALIZED
        self._error: InitializationError | None = None
        self._lock = asyncio.Lock()

    @property
    def state(self) -> InitState:
        return self._state

    async def run(self, action: Callable[[], Awaitable[None]]) -> None:
        if self._state is not InitState.DONE:
            async with self._lock:
                if self._state is InitState.UNINITIALIZED:
                    self._state = InitState.IN_PROGRESS
                    await self._run_once(action)

        if self._error is not None:
            raise self._error

    async def _run_once(self, action: Callable[[], Awaitable[None]]) -> None:
        logger.info("Initialising %s", self.name)
        try:
            await action()
        except asyncio.CancelledError:
            self._error = InitializationError(f"{self.name} initialisation was cancelled")
            raise
        except Exception as exc:
            logger.exception("Initialisation of %s failed", self.name)
            error = InitializationError(f"{self.name} initialisation failed: {exc}")
            error.__cause__ = exc
            self._error = error
        else:
            logger.info("Initialised %s", self.name)
        finally:
            self._state = InitState.DONE


class BaseRepository(Generic[ModelType]):
    """Base repository over a session factory with a seeded, read-only table."""

    def __init__(
        self,
        model: type[ModelType],
        session_factory: async_sessionmaker[AsyncSession],
        seeder: Seeder,
    ):
        self.model = model
        self.session_factory = session_factory
        self.seeder = seeder
        self._guard = InitGuard(model.__tablename__)

    @property
    def init_state(self) -> InitState:
        return self._guard.state

    async def init(self) -> None:
        """Seed the table. Runs once; failures are permanent."""
        await self._guard.run(self._seed)

    async def _seed(self) -> None:
        async with self.session_factory() as session:
            await self.seeder(session)
            await session.commit()

    async def _fetch_all(self, query: Select) -> list[Row]:
        """Execute a query and return every row."""
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                return list(result.all())
        except SQLAlchemyError as exc:
            logger.error("Query on %s failed: %s", self.model.__tablename__, exc)
            raise QueryExecutionError(str(exc)) from exc
        except (TypeError, ValueError) as exc:
            raise RowDecodeError(f"malformed {self.model.__tablename__} row: {exc}") from exc

    async def _fetch_first(self, query: Select) -> Row | None:
        """Execute a query and return its first row, or None."""
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                return result.first()
        except SQLAlchemyError as exc:
            logger.error("Query on %s failed: %s", self.model.__tablename__, exc)
            raise QueryExecutionError(str(exc)) from exc
        except (TypeError, ValueError) as exc:
            raise RowDecodeError(f"malformed {self.model.__tablename__} row: {exc}") from exc
