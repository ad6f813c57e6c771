"""Member listing criteria and their translation to SQL.

Filtering runs before ordering, and both run before the pagination helpers
count and slice the statement, so the total always describes the filtered set.
"""

from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from app.core.enums import GenderEnum, MemberOrderEnum
from app.modules.identity.models import User
from app.shared.pagination import PageParams
from app.shared.utils import add_years

DEFAULT_MIN_AGE = 18
DEFAULT_MAX_AGE = 99
MAXIMUM_AGE = 150


class AgeRange(BaseModel):
    """Inclusive age bounds in completed years."""

    model_config = ConfigDict(frozen=True)

    min_age: int = Field(ge=0, le=MAXIMUM_AGE)
    max_age: int = Field(ge=0, le=MAXIMUM_AGE)

    def dob_bounds(self, today: date) -> tuple[date, date]:
        """Return (min_dob, max_dob) for members aged min_age..max_age today.

        ``min_dob`` is ``today - (max_age + 1)`` years and is exclusive: a
        member born exactly on it turns ``max_age + 1`` today. ``max_dob`` is
        ``today - min_age`` years and is inclusive.
        """
        return add_years(today, -(self.max_age + 1)), add_years(today, -self.min_age)


class MemberQueryParams(BaseModel):
    """Typed listing request built by the boundary layer."""

    model_config = ConfigDict(frozen=True)

    gender: GenderEnum
    exclude_id: UUID | None = None
    age_range: AgeRange | None = None
    order_by: MemberOrderEnum = MemberOrderEnum.LAST_ACTIVE
    page: PageParams = Field(default_factory=PageParams)

    @classmethod
    def from_bounds(
        cls,
        *,
        min_age: int,
        max_age: int,
        default_min_age: int = DEFAULT_MIN_AGE,
        default_max_age: int = DEFAULT_MAX_AGE,
        **fields: object,
    ) -> "MemberQueryParams":
        """Build params, leaving the age filter off for the default bounds.

        An explicit request for exactly the default range is indistinguishable
        from no preference and is treated as no preference.
        """
        age_range = None
        if (min_age, max_age) != (default_min_age, default_max_age):
            age_range = AgeRange(min_age=min_age, max_age=max_age)
        return cls(age_range=age_range, **fields)


_ORDER_COLUMNS = {
    MemberOrderEnum.CREATED: User.created_at,
    MemberOrderEnum.LAST_ACTIVE: User.last_active,
}


def base_member_query() -> Select[tuple[User]]:
    """All members with their photo sets loaded."""
    return select(User).options(selectinload(User.photos))


def apply_member_filters(stmt: Select, params: MemberQueryParams, today: date) -> Select:
    stmt = stmt.where(User.gender == params.gender)
    if params.exclude_id is not None:
        stmt = stmt.where(User.id != params.exclude_id)

    if params.age_range is not None:
        min_dob, max_dob = params.age_range.dob_bounds(today)
        # Lower bound stays exclusive: a member born on min_dob turns max_age + 1 today.
        stmt = stmt.where(User.date_of_birth > min_dob, User.date_of_birth <= max_dob)
    return stmt


def apply_member_order(stmt: Select, order_by: MemberOrderEnum) -> Select:
    """Newest first on the chosen timestamp; id breaks ties."""
    column = _ORDER_COLUMNS.get(order_by, User.last_active)
    return stmt.order_by(column.desc(), User.id.desc())


def build_member_query(
    params: MemberQueryParams,
    today: date,
    base: Select | None = None,
) -> Select:
    stmt = base if base is not None else base_member_query()
    return apply_member_order(apply_member_filters(stmt, params, today), params.order_by)
