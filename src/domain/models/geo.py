from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A validated WGS84 coordinate, used where input crosses a boundary.

    Distance helpers do not require it: they accept any object with
    ``lat``/``lon`` attributes.
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lat) and math.isfinite(self.lon)):
            raise ValueError(f"Non-finite coordinate: ({self.lat}, {self.lon})")
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")

    @classmethod
    def of(cls, obj: object) -> GeoPoint:
        """Coordinate of anything exposing ``lat``/``lon`` (e.g. a station)."""

        return cls(lat=float(obj.lat), lon=float(obj.lon))  # type: ignore[attr-defined]
