from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest
from pydantic import ValidationError

from app.core.enums import GenderEnum, MemberOrderEnum
from app.modules.members.query import MAXIMUM_AGE, AgeRange, MemberQueryParams, build_member_query
from app.shared.pagination import PageParams, build_page, count_pages
from app.shared.utils import add_years, age_on

TODAY = date(2026, 10, 19)


def test_age_range_translates_to_asymmetric_birth_date_bounds() -> None:
    min_dob, max_dob = AgeRange(min_age=25, max_age=30).dob_bounds(TODAY)

    assert min_dob == date(1995, 10, 19)
    assert max_dob == date(2001, 10, 19)


def test_age_range_bounds_clamp_leap_day() -> None:
    leap_today = date(2028, 2, 29)

    min_dob, max_dob = AgeRange(min_age=18, max_age=18).dob_bounds(leap_today)

    assert min_dob == date(2009, 2, 28)
    assert max_dob == date(2010, 2, 28)


def test_add_years_and_age_on() -> None:
    assert add_years(date(2000, 2, 29), 1) == date(2001, 2, 28)
    assert age_on(date(2001, 10, 19), TODAY) == 25
    assert age_on(date(2001, 10, 20), TODAY) == 24


def test_age_range_rejects_ages_beyond_maximum() -> None:
    with pytest.raises(ValidationError):
        AgeRange(min_age=18, max_age=MAXIMUM_AGE + 1)

    min_dob, _ = AgeRange(min_age=18, max_age=MAXIMUM_AGE).dob_bounds(TODAY)
    assert min_dob == date(1875, 10, 19)


def test_default_bounds_leave_age_filter_off() -> None:
    params = MemberQueryParams.from_bounds(min_age=18, max_age=99, gender=GenderEnum.FEMALE)

    assert params.age_range is None


def test_custom_bounds_turn_age_filter_on() -> None:
    params = MemberQueryParams.from_bounds(min_age=18, max_age=40, gender=GenderEnum.MALE)

    assert params.age_range == AgeRange(min_age=18, max_age=40)


def test_query_params_are_immutable() -> None:
    params = MemberQueryParams(gender=GenderEnum.FEMALE)

    with pytest.raises(ValidationError):
        params.gender = GenderEnum.MALE  # type: ignore[misc]


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("created", MemberOrderEnum.CREATED),
        ("lastActive", MemberOrderEnum.LAST_ACTIVE),
        (None, MemberOrderEnum.LAST_ACTIVE),
        ("", MemberOrderEnum.LAST_ACTIVE),
        ("popularity", MemberOrderEnum.LAST_ACTIVE),
    ],
)
def test_order_token_parsing_falls_back_to_last_active(
    token: str | None,
    expected: MemberOrderEnum,
) -> None:
    assert MemberOrderEnum.parse(token) is expected


def test_gender_opposite() -> None:
    assert GenderEnum.MALE.opposite is GenderEnum.FEMALE
    assert GenderEnum.FEMALE.opposite is GenderEnum.MALE


@pytest.mark.parametrize(
    ("order_by", "column"),
    [
        (MemberOrderEnum.CREATED, "users.created_at DESC"),
        (MemberOrderEnum.LAST_ACTIVE, "users.last_active DESC"),
    ],
)
def test_member_query_orders_by_selected_timestamp(order_by: MemberOrderEnum, column: str) -> None:
    params = MemberQueryParams(gender=GenderEnum.FEMALE, order_by=order_by, exclude_id=uuid4())

    stmt = build_member_query(params, TODAY)
    sql = str(stmt.compile())

    assert f"ORDER BY {column}, users.id DESC" in sql
    assert "date_of_birth" not in str(stmt.whereclause)


def test_member_query_adds_birth_date_predicates_only_with_age_range() -> None:
    params = MemberQueryParams(
        gender=GenderEnum.FEMALE,
        age_range=AgeRange(min_age=20, max_age=30),
    )

    where_sql = str(build_member_query(params, TODAY).whereclause)

    assert "users.date_of_birth >" in where_sql
    assert "users.date_of_birth <=" in where_sql


@pytest.mark.parametrize(
    ("total", "size", "pages"),
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3)],
)
def test_count_pages_is_ceiling(total: int, size: int, pages: int) -> None:
    assert count_pages(total, size) == pages


def test_build_page_keeps_true_totals_past_last_page() -> None:
    params = PageParams(page_number=7, page_size=10)

    page = build_page([], 25, params)

    assert page.items == []
    assert page.current_page == 7
    assert page.total_items == 25
    assert page.total_pages == 3
    assert params.offset == 60
