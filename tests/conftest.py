from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

import app.modules  # noqa: F401
from app.core.database import Base
from tests.factories import SyncSessionAdapter


@pytest.fixture()
def db_session() -> Iterator[Session]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture()
def async_session(db_session: Session) -> SyncSessionAdapter:
    return SyncSessionAdapter(db_session)
