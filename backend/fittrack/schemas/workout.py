from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from fittrack.core.time_utils import ensure_utc
from fittrack.schemas.base import CamelModel


class WorkoutType(str, Enum):
    running = "running"
    cycling = "cycling"
    swimming = "swimming"
    hiit = "hiit"
    strength = "strength"
    other = "other"


class WorkoutBase(CamelModel):
    user_id: int
    type: WorkoutType
    name: str
    date: datetime

    duration: int = Field(gt=0)  # minutes
    distance: Optional[float] = Field(default=None, ge=0)  # miles
    calories: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None

    @field_validator("date")
    @classmethod
    def _date_utc(cls, v):
        return ensure_utc(v)


class WorkoutCreate(WorkoutBase):
    """Schema for creating a new workout."""
    pass


class WorkoutUpdate(CamelModel):
    """Schema for updating an existing workout (all fields optional)."""

    user_id: Optional[int] = None
    type: Optional[WorkoutType] = None
    name: Optional[str] = None
    date: Optional[datetime] = None
    duration: Optional[int] = Field(default=None, gt=0)
    distance: Optional[float] = Field(default=None, ge=0)
    calories: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None

    @field_validator("user_id", "type", "name", "date", "duration")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be cleared")
        return v

    @field_validator("date")
    @classmethod
    def _date_utc(cls, v):
        return ensure_utc(v)


class WorkoutRead(WorkoutBase):
    """Stored workout record."""

    id: int
    model_config = ConfigDict(from_attributes=True, frozen=True)
