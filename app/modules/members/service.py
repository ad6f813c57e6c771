"""Members business logic layer."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends

from app.core.database import UnitOfWork, get_unit_of_work
from app.core.metrics import record_member_query
from app.modules.members.query import MemberQueryParams
from app.modules.members.repository import MembersRepository
from app.modules.members.schemas import MemberDetail, MemberListItem
from app.shared.exceptions import NotFoundException
from app.shared.pagination import Page, build_page
from app.shared.utils import utc_today

logger = logging.getLogger(__name__)


class MembersService:
    """Member browsing service."""

    def __init__(self, repository: MembersRepository) -> None:
        self.repository = repository

    async def list_members(self, params: MemberQueryParams) -> Page[MemberListItem]:
        """Return one page of members matching the listing criteria."""
        today = utc_today()
        members, total = await self.repository.list_members(params, today)
        page = build_page(
            [MemberListItem.from_member(member, today) for member in members],
            total,
            params.page,
        )

        record_member_query(params.order_by.value, params.age_range is not None, total)
        logger.debug(
            "Listed members gender=%s order=%s page=%s/%s total=%s",
            params.gender,
            params.order_by,
            page.current_page,
            page.total_pages,
            page.total_items,
        )
        return page

    async def get_member(self, member_id: UUID) -> MemberDetail:
        """Return full member profile."""
        member = await self.repository.get_member(member_id)
        if member is None:
            raise NotFoundException("Member not found")
        return MemberDetail.from_member(member, utc_today())


async def get_members_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> MembersService:
    """Dependency provider for members service."""
    return MembersService(MembersRepository(uow.session))
