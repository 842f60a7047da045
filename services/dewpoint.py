"""Derived comfort metrics."""

from __future__ import annotations


def estimate_dewpoint(temperature: float, relative_humidity: float) -> float:
    """Approximate dew point in degrees Celsius.

    Uses the simple ``T - (100 - RH) / 5`` rule, which is accurate to about
    1 degree for relative humidity above 50%.
    """
    return temperature - (100.0 - relative_humidity) / 5.0
