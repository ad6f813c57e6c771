"""Members API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from app.core.config import get_settings
from app.core.enums import GenderEnum, MemberOrderEnum
from app.modules.identity.models import User
from app.modules.identity.service import get_current_user
from app.modules.members.query import MAXIMUM_AGE, MemberQueryParams
from app.modules.members.schemas import MemberDetail, MemberListItem
from app.modules.members.service import MembersService, get_members_service
from app.shared.exceptions import InvalidQueryException
from app.shared.pagination import PAGINATION_HEADER, Page, PageParams, get_page_params, pagination_header_value

router = APIRouter(prefix="/members", tags=["members"])


def resolve_member_query(
    current_user: User,
    page: PageParams,
    *,
    gender: GenderEnum | None = None,
    min_age: int | None = None,
    max_age: int | None = None,
    order_by: str | None = None,
) -> MemberQueryParams:
    """Translate request values into typed listing params."""
    settings = get_settings()
    if min_age is None:
        min_age = settings.members_default_min_age
    if max_age is None:
        max_age = settings.members_default_max_age
    if min_age > max_age:
        raise InvalidQueryException("minAge must not be greater than maxAge")

    return MemberQueryParams.from_bounds(
        min_age=min_age,
        max_age=max_age,
        default_min_age=settings.members_default_min_age,
        default_max_age=settings.members_default_max_age,
        gender=gender or current_user.gender.opposite,
        exclude_id=current_user.id,
        order_by=MemberOrderEnum.parse(order_by),
        page=page,
    )


@router.get("", response_model=Page[MemberListItem])
async def list_members(
    response: Response,
    gender: GenderEnum | None = Query(default=None),
    min_age: int | None = Query(default=None, ge=0, le=MAXIMUM_AGE, alias="minAge"),
    max_age: int | None = Query(default=None, ge=0, le=MAXIMUM_AGE, alias="maxAge"),
    order_by: str | None = Query(default=None, alias="orderBy"),
    page: PageParams = Depends(get_page_params),
    service: MembersService = Depends(get_members_service),
    current_user: User = Depends(get_current_user),
) -> Page[MemberListItem]:
    """List members matching filters, one page at a time."""
    params = resolve_member_query(
        current_user,
        page,
        gender=gender,
        min_age=min_age,
        max_age=max_age,
        order_by=order_by,
    )
    result = await service.list_members(params)
    response.headers[PAGINATION_HEADER] = pagination_header_value(result)
    return result


@router.get("/{member_id}", response_model=MemberDetail)
async def get_member(
    member_id: UUID,
    service: MembersService = Depends(get_members_service),
    current_user: User = Depends(get_current_user),
) -> MemberDetail:
    """Return member profile with photos."""
    return await service.get_member(member_id)
