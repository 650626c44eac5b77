from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .geo import GeoPoint
from .network import Station


class TravelMode(str, Enum):
    WALKING = "walking"
    DRIVING = "driving"


@dataclass(frozen=True, slots=True)
class NearestStation:
    station: Station
    distance_km: float


@dataclass(frozen=True, slots=True)
class StationAccess:
    """Access to the nearest station.

    ``distance_km`` is straight-line and drives the ETA; ``path_distance_km``
    follows the returned road path.
    """

    station: Station
    distance_km: float
    mode: TravelMode
    path: tuple[GeoPoint, ...]
    path_distance_km: float
    eta_min: int
