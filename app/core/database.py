"""Database setup for async SQLAlchemy 2.0."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, MetaData, Uuid
from sqlalchemy.ext.asyncio import AsyncAttrs, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from app.core.config import get_settings

logger = logging.getLogger(__name__)

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def utc_now() -> datetime:
    """Return timezone-aware UTC datetime."""
    return datetime.now(UTC)


class Base(AsyncAttrs, DeclarativeBase):
    """Declarative base class for all ORM models."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class UUIDMixin:
    """Provide UUID primary key."""

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)


class TimestampMixin:
    """Provide UTC audit timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )


class BaseModelMixin(UUIDMixin, TimestampMixin):
    """Base mixin used by all business entities."""


class UnitOfWork:
    """Explicit change set over one session.

    Repositories read through ``session``; staged additions and deletions are
    persisted only when the owner calls ``commit``.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self._staged = False

    def add(self, entity: object) -> None:
        """Stage a new or modified entity."""
        self.session.add(entity)
        self._staged = True

    async def delete(self, entity: object) -> None:
        await self.session.delete(entity)
        self._staged = True

    async def commit(self) -> bool:
        """Persist staged changes. Return True when anything was written."""
        has_changes = self._staged or bool(
            self.session.new or self.session.dirty or self.session.deleted,
        )
        await self.session.commit()
        self._staged = False
        return has_changes

    async def rollback(self) -> None:
        await self.session.rollback()
        self._staged = False


settings = get_settings()
engine = create_async_engine(settings.database_url, echo=settings.debug, pool_pre_ping=True)
SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_unit_of_work() -> AsyncGenerator[UnitOfWork, None]:
    """FastAPI dependency that provides a unit of work per request.

    Nothing is committed implicitly; services call ``commit`` themselves.
    """
    async with SessionLocal() as session:
        uow = UnitOfWork(session)
        try:
            yield uow
        except Exception:
            logger.debug("Rolling back unit of work after request failure")
            await uow.rollback()
            raise


async def close_engine() -> None:
    """Close SQLAlchemy engine."""
    await engine.dispose()
