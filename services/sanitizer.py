"""Normalization of non-finite sensor values."""

from __future__ import annotations

import math
from dataclasses import replace

from models.records import NUMERIC_FIELDS, Reading

REPLACEMENT_VALUE = 0.0


def sanitize_value(value: float) -> float:
    """Return ``value`` unchanged when finite, otherwise ``0.0``."""
    return value if math.isfinite(value) else REPLACEMENT_VALUE


def sanitize_reading(reading: Reading) -> Reading:
    """Return a copy of ``reading`` with every numeric field finite."""
    changes = {
        name: sanitize_value(getattr(reading, name))
        for name in NUMERIC_FIELDS
        if not math.isfinite(getattr(reading, name))
    }
    if not changes:
        return reading
    return replace(reading, **changes)
