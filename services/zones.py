"""Mapping of client location strings to integer storage zones."""

from __future__ import annotations

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

UNKNOWN_ZONE_ID = 0

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_ZONE_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_zone_id(location: str) -> Optional[int]:
    """Parse ``location`` as a 32-bit zone id, returning ``None`` if it is not one.

    Surrounding whitespace, digit separators and values outside the signed
    32-bit range are rejected, matching the storage column.
    """
    if not _ZONE_PATTERN.fullmatch(location):
        return None
    value = int(location)
    if value < _INT32_MIN or value > _INT32_MAX:
        return None
    return value


def resolve_zone_id(location: str, fallback: int = UNKNOWN_ZONE_ID) -> int:
    """Zone id for ``location``; unparsable locations map to ``fallback``.

    The fallback is a leniency inherited from the sensor firmware contract,
    not validation: an invalid location is stored in zone 0 alongside real
    zone-0 readings.
    """
    zone_id = parse_zone_id(location)
    if zone_id is None:
        logger.warning(
            "Location is not a zone id, storing under fallback zone",
            extra={"location": location, "zone_id": fallback},
        )
        return fallback
    return zone_id
