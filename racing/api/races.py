"""Race API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query

from racing.api.deps import get_race_service
from racing.schemas import ListRacesFilter, RaceListResponse, RaceResponse
from racing.services import RaceService

router = APIRouter(prefix="/races", tags=["races"])


@router.get("", response_model=RaceListResponse)
async def list_races(
    meeting_ids: list[int] = Query([]),
    visible: list[bool] = Query([]),
    order_by_ascending: bool = False,
    service: RaceService = Depends(get_race_service),
):
    """List races, optionally filtered by meeting and visibility."""
    filter = ListRacesFilter(
        meeting_ids=meeting_ids,
        visible=visible,
        order_by_ascending=order_by_ascending,
    )
    return await service.list_races(filter)


@router.get("/{race_id}", response_model=RaceResponse)
async def get_race(
    race_id: int,
    service: RaceService = Depends(get_race_service),
):
    """Get a race by ID."""
    race = await service.get_race(race_id)
    if not race:
        raise HTTPException(status_code=404, detail="Race not found")
    return race
