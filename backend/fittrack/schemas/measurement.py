from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from fittrack.core.time_utils import ensure_utc
from fittrack.schemas.base import CamelModel


class MeasurementBase(CamelModel):
    user_id: int
    date: datetime

    # lbs / percent / inches; any subset may be recorded
    weight: Optional[float] = Field(default=None, ge=0)
    body_fat: Optional[float] = Field(default=None, ge=0, le=100)
    chest: Optional[float] = Field(default=None, ge=0)
    waist: Optional[float] = Field(default=None, ge=0)
    hips: Optional[float] = Field(default=None, ge=0)
    arms: Optional[float] = Field(default=None, ge=0)
    thighs: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None

    @field_validator("date")
    @classmethod
    def _date_utc(cls, v):
        return ensure_utc(v)


class MeasurementCreate(MeasurementBase):
    pass


class MeasurementUpdate(CamelModel):
    user_id: Optional[int] = None
    date: Optional[datetime] = None
    weight: Optional[float] = Field(default=None, ge=0)
    body_fat: Optional[float] = Field(default=None, ge=0, le=100)
    chest: Optional[float] = Field(default=None, ge=0)
    waist: Optional[float] = Field(default=None, ge=0)
    hips: Optional[float] = Field(default=None, ge=0)
    arms: Optional[float] = Field(default=None, ge=0)
    thighs: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None

    @field_validator("user_id", "date")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be cleared")
        return v

    @field_validator("date")
    @classmethod
    def _date_utc(cls, v):
        return ensure_utc(v)


class MeasurementRead(MeasurementBase):
    id: int
    model_config = ConfigDict(from_attributes=True, frozen=True)
