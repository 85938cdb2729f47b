"""Common schema types."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class RaceStatusEnum(str, Enum):
    """Derived race status."""

    OPEN = "OPEN"
    CLOSED = "CLOSED"


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True)
