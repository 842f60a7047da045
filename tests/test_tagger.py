"""Unit tests for threshold tagging."""

from __future__ import annotations

import pytest

from models.records import NUMERIC_FIELDS, Reading
from services.tagger import apply_tags, derive_tags


def _reading(temperature: float = 21.0, co2: float = 600.0) -> Reading:
    values = {name: 0.0 for name in NUMERIC_FIELDS}
    values.update(temperature=temperature, co2=co2)
    return Reading(location="1", **values)


@pytest.mark.parametrize(
    ("temperature", "expected"),
    [
        (25.0, []),
        (25.000001, ["high-temperature"]),
        (18.0, []),
        (17.999999, ["low-temperature"]),
        (21.0, []),
    ],
)
def test_temperature_thresholds_are_strict(temperature: float, expected: list) -> None:
    assert derive_tags(_reading(temperature=temperature)) == expected


@pytest.mark.parametrize(
    ("co2", "expected"),
    [(1000.0, []), (1000.1, ["high-co2"])],
)
def test_co2_threshold_is_strict(co2: float, expected: list) -> None:
    assert derive_tags(_reading(co2=co2)) == expected


def test_tags_follow_fixed_order() -> None:
    assert derive_tags(_reading(temperature=30.0, co2=1200.0)) == ["high-temperature", "high-co2"]
    assert derive_tags(_reading(temperature=10.0, co2=1200.0)) == ["low-temperature", "high-co2"]


def test_apply_tags_leaves_tags_absent_when_nothing_fires() -> None:
    tagged = apply_tags(_reading())

    assert tagged.tags is None


def test_apply_tags_sets_tuple_of_tags() -> None:
    tagged = apply_tags(_reading(temperature=30.0))

    assert tagged.tags == ("high-temperature",)


def test_zeroed_reading_is_tagged_low_temperature() -> None:
    # A sanitized NaN temperature reads as 0.0.
    assert derive_tags(_reading(temperature=0.0)) == ["low-temperature"]
