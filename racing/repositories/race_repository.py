"""Race repository."""

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from racing.exceptions import RowDecodeError, TimestampConversionError
from racing.models import Race
from racing.repositories.base import BaseRepository, Clock, Seeder, to_utc, utc_now
from racing.repositories.filters import compile_race_filter
from racing.schemas import ListRacesFilter, RaceResponse, RaceStatusEnum
from racing.seed import seed_races

logger = logging.getLogger(__name__)

RACE_COLUMNS = (
    Race.id,
    Race.meeting_id,
    Race.name,
    Race.number,
    Race.visible,
    Race.advertised_start_time,
)


def derive_status(advertised_start: datetime, now: datetime) -> RaceStatusEnum:
    """A race is CLOSED once its advertised start is strictly in the past."""
    if advertised_start < now:
        return RaceStatusEnum.CLOSED
    return RaceStatusEnum.OPEN


def scan_race(row: Sequence[Any], clock: Clock) -> RaceResponse:
    """
    Materialize one races row into a RaceResponse.

    Raises:
        RowDecodeError: row has the wrong number of columns or bad values,
            including a missing start time
        TimestampConversionError: start time falls outside the UTC range
    """
    try:
        race_id, meeting_id, name, number, visible, advertised_start = row
    except (TypeError, ValueError) as exc:
        raise RowDecodeError(f"malformed races row: {exc}") from exc

    advertised_start = to_utc(advertised_start)

    try:
        return RaceResponse(
            id=race_id,
            meeting_id=meeting_id,
            name=name,
            number=number,
            visible=visible,
            advertised_start_time=advertised_start,
            status=derive_status(advertised_start, clock()),
        )
    except ValidationError as exc:
        raise RowDecodeError(f"malformed races row {race_id!r}: {exc}") from exc


def sort_races(races: list[RaceResponse], ascending: bool) -> list[RaceResponse]:
    """Stable sort by advertised start time; ties keep their store order."""
    return sorted(races, key=lambda race: race.advertised_start_time, reverse=not ascending)


class RaceRepository(BaseRepository[Race]):
    """Read-only repository for races with derived status."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        seeder: Seeder = seed_races,
        clock: Clock = utc_now,
    ):
        super().__init__(Race, session_factory, seeder)
        self.clock = clock

    async def list(self, filter: ListRacesFilter | None = None) -> list[RaceResponse]:
        """
        List races matching every non-empty predicate of ``filter``.

        Results are sorted by advertised start time, descending unless
        ``filter.order_by_ascending`` is set. A bad row fails the whole call.
        """
        compiled = compile_race_filter(filter)
        query = compiled.apply(select(*RACE_COLUMNS))
        logger.debug("Listing races with %d filter args", len(compiled.args))

        rows = await self._fetch_all(query)
        races = [scan_race(row, self.clock) for row in rows]

        ascending = filter.order_by_ascending if filter is not None else False
        return sort_races(races, ascending)

    async def get(self, race_id: int) -> RaceResponse | None:
        """
        Get a race by id, or None when no row matches.

        A start time outside the UTC range is also reported as None,
        unlike list() which raises. Malformed rows raise on both paths.
        """
        row = await self._fetch_first(select(*RACE_COLUMNS).where(Race.id == race_id))
        if row is None:
            return None

        try:
            return scan_race(row, self.clock)
        except TimestampConversionError as exc:
            logger.warning("Race %s has an out-of-range start time: %s", race_id, exc)
            return None
