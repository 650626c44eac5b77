from __future__ import annotations

import math
from typing import Any, Sequence

EARTH_RADIUS_KM = 6371.0


def haversine_distance_km(a: Any, b: Any) -> float:
    """Great-circle distance in kilometers.

    Accepts anything with ``lat``/``lon`` attributes (stations, GeoPoints).
    Coordinates are not range-checked.
    """

    lat1 = math.radians(a.lat)
    lon1 = math.radians(a.lon)
    lat2 = math.radians(b.lat)
    lon2 = math.radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    return 2.0 * EARTH_RADIUS_KM * math.atan2(math.sqrt(s), math.sqrt(1.0 - s))


def polyline_distance_km(points: Sequence[Any]) -> float:
    if len(points) < 2:
        return 0.0
    total = 0.0
    for a, b in zip(points, points[1:]):
        total += float(haversine_distance_km(a, b))
    return float(total)


def interpolate(a: Any, b: Any, ratio: float) -> tuple[float, float]:
    """Linear (lat, lon) interpolation; ratio 0 is ``a``, 1 is ``b``."""

    return (
        a.lat + (b.lat - a.lat) * ratio,
        a.lon + (b.lon - a.lon) * ratio,
    )
