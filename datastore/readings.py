"""Storage access for sensor readings."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, List, Mapping, Optional

from sqlalchemy import DateTime
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from datastore.engine import build_default_engine
from datastore.errors import StorageError
from datastore.query import TimeBound, build_fetch_statement, build_insert_statement
from datastore.schema import (
    ID_COLUMN,
    LOCATION_COLUMN,
    NUMERIC_COLUMNS,
    READINGS_TABLE,
    RECORDED_AT_COLUMN,
)
from models.records import Reading
from services.sanitizer import sanitize_reading
from services.tagger import apply_tags
from services.zones import resolve_zone_id

logger = logging.getLogger(__name__)


class ReadingRepository:
    """Reads and writes readings through a pooled SQLAlchemy engine.

    Each call checks out one connection for a single statement and returns it
    to the pool on every exit path. Nothing is retried.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def fetch(
        self,
        limit: int,
        start: Optional[TimeBound] = None,
        end: Optional[TimeBound] = None,
    ) -> List[Reading]:
        """Return up to ``limit`` sanitized, tagged readings, newest first."""
        if limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}.")

        statement = build_fetch_statement(limit, start=start, end=end)
        clause = statement.to_clause().columns(**{RECORDED_AT_COLUMN: DateTime})

        try:
            with self.engine.connect() as conn:
                rows = conn.execute(clause, statement.bind_params()).mappings().all()
            readings = [self._materialize(row) for row in rows]
        except SQLAlchemyError as exc:
            raise StorageError("Failed to fetch readings", exc) from exc
        except OverflowError as exc:
            raise StorageError("Failed to bind readings query", exc) from exc
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageError("Failed to materialize reading row", exc) from exc

        logger.debug(
            "Fetched readings",
            extra={
                "table": READINGS_TABLE,
                "limit": limit,
                "start_date": start,
                "end_date": end,
                "record_count": len(readings),
            },
        )
        return readings

    def insert(self, reading: Reading) -> None:
        """Store a client-submitted reading; storage assigns id and timestamp."""
        sanitized = sanitize_reading(reading)
        zone_id = resolve_zone_id(sanitized.location)
        statement = build_insert_statement(
            zone_id, [getattr(sanitized, name) for name in NUMERIC_COLUMNS]
        )

        try:
            with self.engine.begin() as conn:
                conn.execute(statement.to_clause(), statement.bind_params())
        except SQLAlchemyError as exc:
            raise StorageError("Failed to insert reading", exc) from exc

        logger.debug(
            "Inserted reading",
            extra={"table": READINGS_TABLE, "zone_id": zone_id, "location": reading.location},
        )

    @staticmethod
    def _materialize(row: Mapping[str, Any]) -> Reading:
        measurements = {
            name: _as_float(row[column]) for name, column in NUMERIC_COLUMNS.items()
        }
        reading = Reading(
            id=int(row[ID_COLUMN]),
            location=str(row[LOCATION_COLUMN]),
            recorded_at=_as_utc(row[RECORDED_AT_COLUMN]),
            **measurements,
        )
        return apply_tags(sanitize_reading(reading))


def _as_float(value: Any) -> float:
    # NULL columns are treated like any other missing measurement.
    if value is None:
        return float("nan")
    return float(value)


def _as_utc(value: Any) -> datetime:
    if value is None:
        raise ValueError(f"Stored reading has no {RECORDED_AT_COLUMN}.")
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if not isinstance(value, datetime):
        raise TypeError(f"Unexpected {RECORDED_AT_COLUMN} value {value!r}.")
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@lru_cache
def build_default_repository() -> ReadingRepository:
    """Factory that wires the repository to the shared engine."""
    return ReadingRepository(engine=build_default_engine())
