from typing import Optional

from pydantic import ConfigDict, Field

from fittrack.schemas.base import CamelModel


class UserBase(CamelModel):
    username: str = Field(min_length=1)
    display_name: Optional[str] = None
    profile_image: Optional[str] = None


class UserCreate(UserBase):
    """Schema for registering (or seeding) a user."""

    password: str


class UserRead(UserCreate):
    """Stored user record, password included. Never returned over HTTP."""

    id: int
    model_config = ConfigDict(from_attributes=True, frozen=True)


class UserPublic(UserBase):
    """User as returned to the frontend (no password)."""

    id: int
    model_config = ConfigDict(from_attributes=True)
