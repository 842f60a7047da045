"""Descriptive labels derived from sanitized readings."""

from __future__ import annotations

from dataclasses import replace
from typing import List

from models.records import Reading

HIGH_TEMPERATURE_TAG = "high-temperature"
LOW_TEMPERATURE_TAG = "low-temperature"
HIGH_CO2_TAG = "high-co2"

HIGH_TEMPERATURE_THRESHOLD = 25.0
LOW_TEMPERATURE_THRESHOLD = 18.0
HIGH_CO2_THRESHOLD = 1000.0


def derive_tags(reading: Reading) -> List[str]:
    """Return the tags that apply to ``reading`` in their fixed order.

    Thresholds are strict, so a value sitting exactly on a threshold does not
    produce a tag. Temperature yields at most one tag.
    """
    tags: List[str] = []

    if reading.temperature > HIGH_TEMPERATURE_THRESHOLD:
        tags.append(HIGH_TEMPERATURE_TAG)
    elif reading.temperature < LOW_TEMPERATURE_THRESHOLD:
        tags.append(LOW_TEMPERATURE_TAG)

    if reading.co2 > HIGH_CO2_THRESHOLD:
        tags.append(HIGH_CO2_TAG)

    return tags


def apply_tags(reading: Reading) -> Reading:
    """Attach derived tags, leaving ``tags`` as ``None`` when none apply."""
    tags = derive_tags(reading)
    return replace(reading, tags=tuple(tags) if tags else None)
