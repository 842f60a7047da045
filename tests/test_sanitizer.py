"""Unit tests for non-finite value sanitization."""

from __future__ import annotations

import math

import pytest

from models.records import NUMERIC_FIELDS, Reading
from services.sanitizer import sanitize_reading, sanitize_value


def _reading(**overrides: float) -> Reading:
    values = {name: 1.5 for name in NUMERIC_FIELDS}
    values.update(overrides)
    return Reading(location="3", **values)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_values_become_zero(value: float) -> None:
    assert sanitize_value(value) == 0.0


@pytest.mark.parametrize("value", [0.0, -12.5, 1e308, -1e-308, 21.7])
def test_finite_values_are_unchanged(value: float) -> None:
    assert sanitize_value(value) == value


def test_sanitize_reading_zeroes_every_non_finite_field() -> None:
    reading = _reading(**{name: float("nan") for name in NUMERIC_FIELDS})

    sanitized = sanitize_reading(reading)

    assert all(getattr(sanitized, name) == 0.0 for name in NUMERIC_FIELDS)
    assert sanitized.location == "3"


def test_sanitize_reading_keeps_finite_fields() -> None:
    reading = _reading(temperature=float("inf"), co2=float("-inf"), pm2_5=12.0)

    sanitized = sanitize_reading(reading)

    assert sanitized.temperature == 0.0
    assert sanitized.co2 == 0.0
    assert sanitized.pm2_5 == 12.0
    assert sanitized.relative_humidity == 1.5
    assert all(math.isfinite(getattr(sanitized, name)) for name in NUMERIC_FIELDS)


def test_sanitize_reading_returns_same_instance_when_clean() -> None:
    reading = _reading()

    assert sanitize_reading(reading) is reading
