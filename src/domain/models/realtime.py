from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"


@dataclass(frozen=True, slots=True)
class LiveTrain:
    id: str
    line: str
    direction: Direction
    lat: float
    lon: float
    next_station: str
