"""Shared utility functions."""

from __future__ import annotations

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Return aware UTC datetime."""
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Return current UTC calendar date."""
    return utc_now().date()


def add_years(value: date, years: int) -> date:
    """Shift a date by whole years, clamping Feb 29 to Feb 28."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


def age_on(date_of_birth: date, today: date) -> int:
    """Return completed years between birth date and today."""
    age = today.year - date_of_birth.year
    if add_years(date_of_birth, age) > today:
        age -= 1
    return age
