from __future__ import annotations

import logging

import pytest

from services.zones import UNKNOWN_ZONE_ID, parse_zone_id, resolve_zone_id


@pytest.mark.parametrize(
    ("location", "expected"),
    [("42", 42), ("0", 0), ("-7", -7), ("+5", 5), ("2147483647", 2147483647)],
)
def test_parse_zone_id_accepts_integers(location: str, expected: int) -> None:
    assert parse_zone_id(location) == expected


@pytest.mark.parametrize(
    "location",
    ["not-a-number", "", " 42", "4.2", "1_000", "2147483648", "-2147483649", "٤٢"],
)
def test_parse_zone_id_rejects_non_integers(location: str) -> None:
    assert parse_zone_id(location) is None


def test_resolve_zone_id_falls_back_to_unknown_zone(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="services.zones"):
        assert resolve_zone_id("kitchen") == UNKNOWN_ZONE_ID

    assert any(getattr(record, "location", None) == "kitchen" for record in caplog.records)


def test_resolve_zone_id_uses_parsed_value() -> None:
    assert resolve_zone_id("42") == 42


def test_resolve_zone_id_custom_fallback() -> None:
    assert resolve_zone_id("garage", fallback=-1) == -1
