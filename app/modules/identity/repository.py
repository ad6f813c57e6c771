"""Identity repository layer."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import UnitOfWork
from app.core.enums import GenderEnum
from app.modules.identity.models import User


class IdentityRepository:
    """DB operations for identity domain.

    Reads go through the unit of work's session; writes are staged on the
    unit of work and persisted by the caller.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    @property
    def session(self) -> AsyncSession:
        return self.uow.session

    async def get_user_by_username(self, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        return await self.session.scalar(stmt)

    async def get_user_by_id(self, user_id: UUID) -> User | None:
        stmt = select(User).where(User.id == user_id)
        return await self.session.scalar(stmt)

    async def create_user(
        self,
        username: str,
        password_hash: str,
        gender: GenderEnum,
        known_as: str,
        date_of_birth: date,
        city: str,
        country: str,
    ) -> User:
        user = User(
            username=username,
            password_hash=password_hash,
            gender=gender,
            known_as=known_as,
            date_of_birth=date_of_birth,
            city=city,
            country=country,
        )
        self.uow.add(user)
        await self.session.flush()
        return user

    async def touch_last_active(self, user: User, seen_at: datetime) -> User:
        user.last_active = seen_at
        self.uow.add(user)
        await self.session.flush()
        return user
