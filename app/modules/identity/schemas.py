"""Identity schemas."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.enums import GenderEnum
from app.shared.utils import age_on, utc_today

MINIMUM_MEMBER_AGE = 18


class UserCreate(BaseModel):
    """Member registration request."""

    username: str = Field(min_length=3, max_length=64)
    password: str = Field(min_length=8, max_length=128)
    gender: GenderEnum
    known_as: str = Field(min_length=1, max_length=64)
    date_of_birth: date
    city: str = Field(default="", max_length=128)
    country: str = Field(default="", max_length=128)

    @field_validator("username")
    @classmethod
    def normalize_username(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("date_of_birth")
    @classmethod
    def require_adult(cls, value: date) -> date:
        """Members must be at least 18 years old."""
        if age_on(value, utc_today()) < MINIMUM_MEMBER_AGE:
            raise ValueError(f"Member must be at least {MINIMUM_MEMBER_AGE} years old")
        return value


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str
    password: str


class AccessToken(BaseModel):
    """Bearer token response."""

    access_token: str
    token_type: str = "bearer"


class UserRead(BaseModel):
    """Member account output schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    known_as: str
    gender: GenderEnum
    date_of_birth: date
    city: str
    country: str
    created_at: datetime
    last_active: datetime
