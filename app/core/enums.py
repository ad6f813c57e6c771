"""Core enums used across modules."""

from enum import StrEnum


class GenderEnum(StrEnum):
    """Member gender."""

    MALE = "male"
    FEMALE = "female"

    @property
    def opposite(self) -> "GenderEnum":
        """Return the gender a member browses by default."""
        return GenderEnum.FEMALE if self is GenderEnum.MALE else GenderEnum.MALE


class MemberOrderEnum(StrEnum):
    """Sort order for member listings, newest first."""

    CREATED = "created"
    LAST_ACTIVE = "lastActive"

    @classmethod
    def parse(cls, value: str | None) -> "MemberOrderEnum":
        """Resolve a free-form order token.

        Unset or unrecognized tokens resolve to ``LAST_ACTIVE``.
        """
        if value:
            for member in cls:
                if member.value == value.strip():
                    return member
        return cls.LAST_ACTIVE
