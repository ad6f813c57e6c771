"""Identity ORM models."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, Enum as SAEnum, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BaseModelMixin, utc_now
from app.core.enums import GenderEnum

if TYPE_CHECKING:
    from app.modules.members.models import Photo


class User(BaseModelMixin, Base):
    """Registered member.

    ``created_at`` doubles as the registration timestamp used by the
    ``created`` listing order.
    """

    __tablename__ = "users"
    __table_args__ = (Index("ix_users_created_at", "created_at"),)

    username: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    gender: Mapped[GenderEnum] = mapped_column(
        SAEnum(
            GenderEnum,
            name="gender_enum",
            native_enum=False,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        index=True,
        nullable=False,
    )
    date_of_birth: Mapped[date] = mapped_column(Date, index=True, nullable=False)
    known_as: Mapped[str] = mapped_column(String(64), nullable=False)
    last_active: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        index=True,
        nullable=False,
    )
    introduction: Mapped[str] = mapped_column(Text, default="", nullable=False)
    looking_for: Mapped[str] = mapped_column(Text, default="", nullable=False)
    interests: Mapped[str] = mapped_column(Text, default="", nullable=False)
    city: Mapped[str] = mapped_column(String(128), default="", nullable=False)
    country: Mapped[str] = mapped_column(String(128), default="", nullable=False)

    photos: Mapped[list["Photo"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Photo.date_added",
    )

    @property
    def main_photo_url(self) -> str | None:
        for photo in self.photos:
            if photo.is_main:
                return photo.url
        return None
