from __future__ import annotations

from typing import Iterable

from src.domain.exceptions import EmptyNetwork
from src.domain.models import GeoPoint, NearestStation, Station

from .geo_utils import haversine_distance_km


def find_nearest_station(
    stations: Iterable[Station], lat: float, lon: float
) -> NearestStation:
    """Linear scan for the closest station; the first one wins ties."""

    # Built without validation so out-of-range input still gets an answer.
    point = _Point(lat=lat, lon=lon)

    best: Station | None = None
    best_d = float("inf")
    for station in stations:
        d = haversine_distance_km(point, station)
        if best is None or d < best_d:
            best = station
            best_d = d

    if best is None:
        raise EmptyNetwork("Cannot search for the nearest station of an empty network")
    return NearestStation(station=best, distance_km=float(best_d))


def find_nearest_to_point(stations: Iterable[Station], point: GeoPoint) -> NearestStation:
    return find_nearest_station(stations, point.lat, point.lon)


def search_stations(
    stations: Iterable[Station], query: str, *, limit: int = 5
) -> list[Station]:
    """Case-insensitive substring match on station names, in network order."""

    needle = (query or "").lower()
    out: list[Station] = []
    for station in stations:
        if len(out) >= limit:
            break
        if needle in station.name.lower():
            out.append(station)
    return out


class _Point:
    __slots__ = ("lat", "lon")

    def __init__(self, *, lat: float, lon: float) -> None:
        self.lat = lat
        self.lon = lon
