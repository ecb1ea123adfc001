"""Distance unit conversions.

Meters are the only unit the engine sees. Convert at the aggregation
boundary and nowhere else.
"""

from __future__ import annotations

from risk_engine.models.enums import METERS_PER_MILE


def miles_to_meters(miles: float) -> float:
    return miles * METERS_PER_MILE


def km_to_meters(km: float) -> float:
    return km * 1000.0
