"""Page-number pagination over SQLAlchemy selects."""

from __future__ import annotations

import json
import math
from collections.abc import Sequence
from typing import Generic, TypeVar

from fastapi import Query
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings

T = TypeVar("T")

PAGINATION_HEADER = "Pagination"


class PageParams(BaseModel):
    """Validated page request. Both values are positive."""

    model_config = ConfigDict(frozen=True)

    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


def get_page_params(
    page_number: int = Query(default=1, ge=1, alias="pageNumber"),
    page_size: int | None = Query(default=None, ge=1, alias="pageSize"),
) -> PageParams:
    """FastAPI dependency for page params.

    Missing page size falls back to the configured default; oversized values
    are clamped to the configured maximum.
    """
    settings = get_settings()
    if page_size is None:
        page_size = settings.members_default_page_size
    return PageParams(
        page_number=page_number,
        page_size=min(page_size, settings.members_max_page_size),
    )


def count_pages(total_items: int, page_size: int) -> int:
    """Return ceil(total_items / page_size)."""
    return math.ceil(total_items / page_size)


class Page(BaseModel, Generic[T]):
    """Generic paginated response."""

    items: list[T]
    current_page: int
    page_size: int
    total_items: int
    total_pages: int


def build_page(items: Sequence[T], total_items: int, params: PageParams) -> Page[T]:
    """Build page object from query result and params."""
    return Page(
        items=list(items),
        current_page=params.page_number,
        page_size=params.page_size,
        total_items=total_items,
        total_pages=count_pages(total_items, params.page_size),
    )


async def paginate(
    session: AsyncSession,
    stmt: Select,
    params: PageParams,
) -> tuple[list, int]:
    """Count the filtered statement, then fetch the requested slice.

    ``stmt`` must already carry its filters and ordering. The count ignores
    ordering; the slice preserves it. Pages past the end yield no items.
    """
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = int((await session.scalar(count_stmt)) or 0)
    if total == 0 or params.offset >= total:
        return [], total

    page_stmt = stmt.limit(params.page_size).offset(params.offset)
    items = (await session.scalars(page_stmt)).all()
    return list(items), total


def pagination_header_value(page: Page) -> str:
    """Serialize page metadata for the ``Pagination`` response header."""
    return json.dumps(
        {
            "currentPage": page.current_page,
            "itemsPerPage": page.page_size,
            "totalItems": page.total_items,
            "totalPages": page.total_pages,
        },
    )
