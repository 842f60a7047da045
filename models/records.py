"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

NUMERIC_FIELDS: Tuple[str, ...] = (
    "temperature",
    "relative_humidity",
    "pm1",
    "pm2_5",
    "pm4",
    "pm10",
    "voc_index",
    "nox_index",
    "formaldehyde",
    "co2",
    "indoor_dewpoint",
)


@dataclass(frozen=True, slots=True)
class Reading:
    """A single air-quality sample from one sensor location.

    ``id`` and ``recorded_at`` are assigned by storage and are ``None`` for
    readings built from a client payload. ``tags`` is ``None`` unless at least
    one tag applies; it is never an empty tuple.
    """

    location: str
    temperature: float
    relative_humidity: float
    voc_index: float
    nox_index: float
    pm1: float
    pm2_5: float
    pm4: float
    pm10: float
    formaldehyde: float
    co2: float
    indoor_dewpoint: float
    id: Optional[int] = None
    recorded_at: Optional[datetime] = None
    tags: Optional[Tuple[str, ...]] = None
