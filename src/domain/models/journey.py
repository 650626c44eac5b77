from __future__ import annotations

import math
from dataclasses import dataclass, field

from .network import Station

MINUTES_PER_KM = 2.5
TRANSFER_PENALTY_MIN = 8
BOARDING_ALLOWANCE_MIN = 5


@dataclass(frozen=True, slots=True)
class JourneyLeg:
    """A same-line run of stations travelled in one direction."""

    line: str
    color: str
    stations: tuple[Station, ...]
    direction: str  # name of the station the leg is heading toward
    distance_km: float
    fare: int

    @property
    def stops(self) -> int:
        return len(self.stations) - 1


@dataclass(frozen=True, slots=True)
class Journey:
    origin: Station | None
    destination: Station | None
    legs: tuple[JourneyLeg, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return bool(self.legs)

    @property
    def transfers(self) -> int:
        return max(0, len(self.legs) - 1)

    @property
    def total_distance_km(self) -> float:
        return float(sum(leg.distance_km for leg in self.legs))

    @property
    def total_fare(self) -> int:
        # Charged per leg: each line change passes a new fare gate.
        return int(sum(leg.fare for leg in self.legs))

    @property
    def total_stops(self) -> int:
        return sum(leg.stops for leg in self.legs)

    @property
    def total_time_min(self) -> int:
        if len(self.legs) > 1:
            overhead = (len(self.legs) - 1) * TRANSFER_PENALTY_MIN
        else:
            overhead = BOARDING_ALLOWANCE_MIN
        # Half-up rounding, not banker's rounding.
        return int(math.floor(self.total_distance_km * MINUTES_PER_KM + overhead + 0.5))
