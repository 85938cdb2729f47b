"""Race service."""

from racing.repositories import RaceRepository
from racing.schemas import ListRacesFilter, RaceListResponse, RaceResponse


class RaceService:
    """Service for race operations."""

    def __init__(self, race_repo: RaceRepository):
        self.race_repo = race_repo

    async def list_races(self, filter: ListRacesFilter | None = None) -> RaceListResponse:
        """List races matching a filter."""
        races = await self.race_repo.list(filter)
        return RaceListResponse(races=races)

    async def get_race(self, race_id: int) -> RaceResponse | None:
        """Get a race by ID."""
        return await self.race_repo.get(race_id)
