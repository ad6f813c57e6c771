"""Members repository layer."""

from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.modules.identity.models import User
from app.modules.members.query import MemberQueryParams, build_member_query
from app.shared.pagination import paginate


class MembersRepository:
    """Read-side DB operations for member browsing."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_members(self, params: MemberQueryParams, today: date) -> tuple[list[User], int]:
        stmt = build_member_query(params, today)
        return await paginate(self.session, stmt, params.page)

    async def get_member(self, member_id: UUID) -> User | None:
        stmt = select(User).options(selectinload(User.photos)).where(User.id == member_id)
        return await self.session.scalar(stmt)
