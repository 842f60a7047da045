from __future__ import annotations

import pytest

from services.dewpoint import estimate_dewpoint


def test_saturated_air_dewpoint_equals_temperature() -> None:
    assert estimate_dewpoint(21.0, 100.0) == 21.0


def test_dewpoint_drops_with_humidity() -> None:
    assert estimate_dewpoint(25.0, 50.0) == pytest.approx(15.0)
