"""Seed idempotent demo members for local/non-production environments."""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

from sqlalchemy import select

from app.core.config import get_settings
from app.core.database import SessionLocal, UnitOfWork, close_engine
from app.core.enums import GenderEnum
from app.core.security import hash_password
from app.modules.identity.models import User
from app.modules.members.models import Photo
from app.shared.utils import add_years

DEMO_PASSWORD = "DemoPass123!"
DEMO_USERNAME_PREFIX = "demo-member"
DEMO_MEMBER_COUNT = 40
DEMO_CITIES = (("Berlin", "Germany"), ("Lisbon", "Portugal"), ("Austin", "USA"), ("Osaka", "Japan"))
DEMO_PHOTO_URL = "https://randomuser.me/api/portraits/{folder}/{index}.jpg"


@dataclass(slots=True)
class SeedStats:
    members_created: int = 0
    members_existing: int = 0
    photos_created: int = 0


def _demo_member_fields(index: int, today: date, now: datetime) -> dict:
    gender = GenderEnum.FEMALE if index % 2 else GenderEnum.MALE
    city, country = DEMO_CITIES[index % len(DEMO_CITIES)]
    return {
        "username": f"{DEMO_USERNAME_PREFIX}-{index:02d}",
        "gender": gender,
        "known_as": f"Demo {index:02d}",
        "date_of_birth": add_years(today, -(19 + (index * 7) % 50)) - timedelta(days=index),
        "city": city,
        "country": country,
        "introduction": "Demo profile for local browsing.",
        "last_active": now - timedelta(hours=index * 5),
    }


async def _ensure_member(uow: UnitOfWork, index: int, today: date, now: datetime) -> tuple[bool, bool]:
    fields = _demo_member_fields(index, today, now)
    existing = await uow.session.scalar(select(User).where(User.username == fields["username"]))
    if existing is not None:
        return False, False

    user = User(password_hash=hash_password(DEMO_PASSWORD), **fields)
    uow.add(user)
    await uow.session.flush()

    folder = "women" if user.gender is GenderEnum.FEMALE else "men"
    uow.add(
        Photo(
            user_id=user.id,
            url=DEMO_PHOTO_URL.format(folder=folder, index=index),
            description="Main photo",
            is_main=True,
        ),
    )
    return True, True


async def _run_seed(*, allow_production: bool, count: int) -> SeedStats:
    settings = get_settings()
    app_env = settings.app_env.strip().lower()
    if app_env in {"production", "prod"} and not allow_production:
        raise RuntimeError(
            "Refusing to seed demo data in production. "
            "Re-run with --allow-production only if you are absolutely sure.",
        )

    stats = SeedStats()
    now = datetime.now(UTC)

    async with SessionLocal() as session:
        uow = UnitOfWork(session)
        try:
            for index in range(count):
                created, photo_created = await _ensure_member(uow, index, now.date(), now)
                if created:
                    stats.members_created += 1
                else:
                    stats.members_existing += 1
                stats.photos_created += int(photo_created)
            await uow.commit()
        except Exception:
            await uow.rollback()
            raise

    return stats


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Seed idempotent demo members for DatingApp (profiles with a main photo).",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=DEMO_MEMBER_COUNT,
        help="Number of demo members to ensure.",
    )
    parser.add_argument(
        "--allow-production",
        action="store_true",
        help="Allow seeding even when APP_ENV is production/prod.",
    )
    return parser


def _print_summary(stats: SeedStats) -> None:
    print("Demo seed completed.")
    print(f"- Members created: {stats.members_created}")
    print(f"- Members already present: {stats.members_existing}")
    print(f"- Photos created: {stats.photos_created}")
    print("")
    print("Demo credentials (non-production only):")
    print(f"- {DEMO_USERNAME_PREFIX}-00 .. / {DEMO_PASSWORD}")


def main() -> int:
    parser = _build_parser()
    args = parser.parse_args()

    try:
        stats = asyncio.run(_run_seed(allow_production=args.allow_production, count=args.count))
    except Exception as exc:
        print(f"Demo seed failed: {exc}")
        return 1
    finally:
        asyncio.run(close_engine())

    _print_summary(stats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
