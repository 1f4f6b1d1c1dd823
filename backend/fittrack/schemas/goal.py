from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from fittrack.core.time_utils import ensure_utc, utc_now
from fittrack.schemas.base import CamelModel


class GoalType(str, Enum):
    weight = "weight"        # lower is better
    running = "running"
    frequency = "frequency"
    other = "other"


class GoalBase(CamelModel):
    user_id: int
    title: str
    description: Optional[str] = None
    type: GoalType

    # Same unit for both; interpreted only by goal_metrics
    target: float
    current: float
    unit: str

    deadline: Optional[datetime] = None  # None = ongoing / recurring
    completed: bool = False
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("deadline", "created_at")
    @classmethod
    def _utc(cls, v):
        return ensure_utc(v)


class GoalCreate(GoalBase):
    """Schema for creating a goal; created_at defaults to now."""
    pass


class GoalUpdate(CamelModel):
    """Schema for updating a goal (all fields optional).

    An explicit `deadline: null` clears the deadline; omitting it keeps it.
    """

    user_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[GoalType] = None
    target: Optional[float] = None
    current: Optional[float] = None
    unit: Optional[str] = None
    deadline: Optional[datetime] = None
    completed: Optional[bool] = None
    created_at: Optional[datetime] = None

    @field_validator(
        "user_id", "title", "type", "target", "current", "unit", "completed", "created_at"
    )
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be cleared")
        return v

    @field_validator("deadline", "created_at")
    @classmethod
    def _utc(cls, v):
        return ensure_utc(v)


class GoalRead(GoalBase):
    id: int
    model_config = ConfigDict(from_attributes=True, frozen=True)


class GoalProgressRead(GoalRead):
    """Goal plus the derived values shown on the dashboard."""

    progress: int            # whole percent, 0-100
    time_remaining: str      # e.g. "3 days remaining"
