from __future__ import annotations

from typing import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from datastore.readings import ReadingRepository
from datastore.schema import create_schema


@pytest.fixture
def engine() -> Iterator[Engine]:
    """In-memory SQLite engine with the readings table created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine: Engine) -> ReadingRepository:
    return ReadingRepository(engine=engine)
