from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

import app.modules.members.service as members_service_module
from app.core.enums import GenderEnum, MemberOrderEnum
from app.core.metrics import build_metrics_response
from app.modules.members.query import AgeRange, MemberQueryParams
from app.modules.members.service import MembersService
from app.shared.exceptions import NotFoundException
from app.shared.pagination import PageParams

FIXED_NOW = datetime(2026, 10, 19, 9, 30, tzinfo=UTC)


@dataclass
class FakePhoto:
    id: UUID
    url: str
    description: str = ""
    is_main: bool = True
    date_added: datetime = FIXED_NOW


@dataclass
class FakeMember:
    id: UUID
    date_of_birth: date
    gender: GenderEnum = GenderEnum.FEMALE
    username: str = "member"
    known_as: str = "Member"
    city: str = "Lisbon"
    country: str = "Portugal"
    introduction: str = ""
    looking_for: str = ""
    interests: str = ""
    created_at: datetime = FIXED_NOW
    last_active: datetime = FIXED_NOW
    photos: list[FakePhoto] = field(default_factory=list)

    @property
    def main_photo_url(self) -> str | None:
        return next((photo.url for photo in self.photos if photo.is_main), None)


class FakeMembersRepository:
    def __init__(self, members: list[FakeMember], total: int | None = None) -> None:
        self.members = members
        self.total = len(members) if total is None else total
        self.calls: list[tuple[MemberQueryParams, date]] = []

    async def list_members(self, params: MemberQueryParams, today: date) -> tuple[list[FakeMember], int]:
        self.calls.append((params, today))
        return self.members, self.total

    async def get_member(self, member_id: UUID) -> FakeMember | None:
        return next((member for member in self.members if member.id == member_id), None)


@pytest.fixture(autouse=True)
def _freeze_clock(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(members_service_module, "utc_today", lambda: FIXED_NOW.date())


@pytest.mark.asyncio
async def test_list_members_anchors_query_to_today_and_builds_metadata() -> None:
    members = [FakeMember(id=uuid4(), date_of_birth=date(1996, 10, 20)) for _ in range(5)]
    repository = FakeMembersRepository(members, total=25)
    service = MembersService(repository)  # type: ignore[arg-type]
    params = MemberQueryParams(
        gender=GenderEnum.FEMALE,
        page=PageParams(page_number=3, page_size=10),
    )

    page = await service.list_members(params)

    assert repository.calls == [(params, FIXED_NOW.date())]
    assert len(page.items) == 5
    assert page.current_page == 3
    assert page.page_size == 10
    assert page.total_items == 25
    assert page.total_pages == 3
    assert page.items[0].age == 29


@pytest.mark.asyncio
async def test_list_members_exposes_main_photo_url() -> None:
    member = FakeMember(
        id=uuid4(),
        date_of_birth=date(1990, 1, 1),
        photos=[
            FakePhoto(id=uuid4(), url="https://img.example/extra.jpg", is_main=False),
            FakePhoto(id=uuid4(), url="https://img.example/main.jpg"),
        ],
    )
    service = MembersService(FakeMembersRepository([member]))  # type: ignore[arg-type]

    page = await service.list_members(MemberQueryParams(gender=GenderEnum.FEMALE))

    assert page.items[0].photo_url == "https://img.example/main.jpg"


@pytest.mark.asyncio
async def test_list_members_records_query_metrics() -> None:
    service = MembersService(FakeMembersRepository([]))  # type: ignore[arg-type]

    await service.list_members(
        MemberQueryParams(
            gender=GenderEnum.MALE,
            order_by=MemberOrderEnum.CREATED,
            age_range=AgeRange(min_age=30, max_age=40),
        ),
    )

    payload = build_metrics_response().body.decode("utf-8")
    assert "datingapp_member_list_queries_total" in payload
    assert 'order_by="created"' in payload
    assert 'age_filter="on"' in payload


@pytest.mark.asyncio
async def test_empty_listing_has_zero_pages() -> None:
    service = MembersService(FakeMembersRepository([]))  # type: ignore[arg-type]

    page = await service.list_members(MemberQueryParams(gender=GenderEnum.FEMALE))

    assert page.items == []
    assert page.total_items == 0
    assert page.total_pages == 0


@pytest.mark.asyncio
async def test_get_member_returns_detail_with_photos() -> None:
    member = FakeMember(
        id=uuid4(),
        date_of_birth=date(2000, 1, 1),
        introduction="Hi there",
        photos=[FakePhoto(id=uuid4(), url="https://img.example/main.jpg")],
    )
    service = MembersService(FakeMembersRepository([member]))  # type: ignore[arg-type]

    detail = await service.get_member(member.id)

    assert detail.id == member.id
    assert detail.age == 26
    assert detail.introduction == "Hi there"
    assert [photo.url for photo in detail.photos] == ["https://img.example/main.jpg"]


@pytest.mark.asyncio
async def test_get_member_raises_not_found() -> None:
    service = MembersService(FakeMembersRepository([]))  # type: ignore[arg-type]

    with pytest.raises(NotFoundException):
        await service.get_member(uuid4())
