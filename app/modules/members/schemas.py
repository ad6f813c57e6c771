"""Members schemas."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from app.core.enums import GenderEnum
from app.modules.identity.models import User
from app.shared.utils import age_on


class PhotoRead(BaseModel):
    """Photo response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    url: str
    description: str
    is_main: bool
    date_added: datetime


class MemberListItem(BaseModel):
    """Member card shown in listings."""

    id: UUID
    username: str
    known_as: str
    gender: GenderEnum
    age: int
    city: str
    country: str
    created_at: datetime
    last_active: datetime
    photo_url: str | None

    @classmethod
    def from_member(cls, member: User, today: date) -> "MemberListItem":
        return cls(
            id=member.id,
            username=member.username,
            known_as=member.known_as,
            gender=member.gender,
            age=age_on(member.date_of_birth, today),
            city=member.city,
            country=member.country,
            created_at=member.created_at,
            last_active=member.last_active,
            photo_url=member.main_photo_url,
        )


class MemberDetail(MemberListItem):
    """Full member profile."""

    introduction: str
    looking_for: str
    interests: str
    photos: list[PhotoRead]

    @classmethod
    def from_member(cls, member: User, today: date) -> "MemberDetail":
        card = MemberListItem.from_member(member, today)
        return cls(
            **card.model_dump(),
            introduction=member.introduction,
            looking_for=member.looking_for,
            interests=member.interests,
            photos=[PhotoRead.model_validate(photo) for photo in member.photos],
        )
