"""Dummy data seeding for the races and events tables."""

import random
from datetime import datetime, timedelta, timezone
from typing import Any

from sqlalchemy import Table
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from racing.config import get_settings
from racing.models import Event, Race

PLACES = [
    "Ballarat", "Bendigo", "Caulfield", "Doomben", "Eagle Farm", "Flemington",
    "Geelong", "Moonee Valley", "Randwick", "Rosehill", "Sandown", "Warrnambool",
]
MASCOTS = [
    "bandits", "comets", "falcons", "foxes", "giants", "hawks",
    "kestrels", "lions", "magpies", "ravens", "storm", "tigers",
]

# Start times fall between a day ago and two days ahead.
START_WINDOW_BEFORE = timedelta(days=1)
START_WINDOW_AFTER = timedelta(days=2)


def _team_name(rng: random.Random) -> str:
    return f"{rng.choice(PLACES)} {rng.choice(MASCOTS)}"


def _start_time(rng: random.Random, now: datetime) -> datetime:
    earliest = now - START_WINDOW_BEFORE
    span = (START_WINDOW_BEFORE + START_WINDOW_AFTER).total_seconds()
    return earliest + timedelta(seconds=rng.uniform(0, span))


def _rng() -> random.Random:
    return random.Random(get_settings().seed_random_seed)


async def _create_and_insert(
    session: AsyncSession, table: Table, rows: list[dict[str, Any]]
) -> None:
    conn = await session.connection()
    await conn.run_sync(table.create, checkfirst=True)
    if rows:
        await session.execute(
            sqlite_insert(table).values(rows).on_conflict_do_nothing(index_elements=["id"])
        )


async def seed_races(
    session: AsyncSession,
    count: int | None = None,
    rng: random.Random | None = None,
) -> None:
    """Create the races table if needed and insert dummy races."""
    count = get_settings().seed_race_count if count is None else count
    rng = rng or _rng()
    now = datetime.now(timezone.utc)

    rows = [
        {
            "id": race_id,
            "meeting_id": rng.randint(1, 10),
            "name": _team_name(rng),
            "number": rng.randint(1, 12),
            "visible": rng.random() < 0.5,
            "advertised_start_time": _start_time(rng, now),
        }
        for race_id in range(1, count + 1)
    ]
    await _create_and_insert(session, Race.__table__, rows)


async def seed_events(
    session: AsyncSession,
    count: int | None = None,
    rng: random.Random | None = None,
) -> None:
    """Create the events table if needed and insert dummy events."""
    count = get_settings().seed_event_count if count is None else count
    rng = rng or _rng()
    now = datetime.now(timezone.utc)

    rows = [
        {
            "id": event_id,
            "name": f"{_team_name(rng)} vs {_team_name(rng)}",
            "advertised_start_time": _start_time(rng, now),
        }
        for event_id in range(1, count + 1)
    ]
    await _create_and_insert(session, Event.__table__, rows)
