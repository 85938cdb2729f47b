"""Race schemas."""

from datetime import datetime

from pydantic import Field

from racing.schemas.common import BaseSchema, RaceStatusEnum


class ListRacesFilter(BaseSchema):
    """Optional membership predicates narrowing a race listing."""

    meeting_ids: list[int] = Field(default_factory=list, description="Meeting ids to include")
    visible: list[bool] = Field(default_factory=list, description="Visibility values to include")
    order_by_ascending: bool = Field(
        False, description="Sort by advertised start time ascending"
    )


class RaceResponse(BaseSchema):
    """Race record with derived status."""

    id: int
    meeting_id: int
    name: str
    number: int
    visible: bool
    advertised_start_time: datetime
    status: RaceStatusEnum


class RaceListResponse(BaseSchema):
    """Race list response schema."""

    races: list[RaceResponse]
