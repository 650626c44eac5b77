"""Schedule-driven pseudo realtime train positions.

Trains are not tracked between calls: every call recomputes all positions
from the time of day alone.
"""

from __future__ import annotations

import math
from datetime import datetime

from src.domain.models import Direction, LiveTrain, MetroLine, Network, Station

from .geo_utils import interpolate

SERVICE_START_MIN = 410.0  # 06:50
SERVICE_END_MIN = 1305.0  # 21:45
PEAK_HOURS = (range(9, 12), range(17, 20))
PEAK_HEADWAY_MIN = 6.0
OFF_PEAK_HEADWAY_MIN = 10.0
MINUTES_PER_SEGMENT = 2.8


def minutes_since_midnight(when: datetime) -> float:
    return when.hour * 60 + when.minute + when.second / 60.0


def is_in_service(now_min: float) -> bool:
    return SERVICE_START_MIN <= now_min <= SERVICE_END_MIN


def headway_minutes(now_min: float) -> float:
    hour = int(math.floor(now_min / 60.0))
    if any(hour in band for band in PEAK_HOURS):
        return PEAK_HEADWAY_MIN
    return OFF_PEAK_HEADWAY_MIN


def line_duration_minutes(line: MetroLine) -> float:
    return (len(line.stations) - 1) * MINUTES_PER_SEGMENT


def slot_count(duration_min: float, headway_min: float) -> int:
    if duration_min <= 0:
        return 0
    return int(math.ceil(duration_min / headway_min))


def _position(
    stations: tuple[Station, ...], offset_min: float, duration_min: float
) -> tuple[float, float, str]:
    n = len(stations)
    progress = offset_min / duration_min
    x = progress * (n - 1)
    idx = min(int(math.floor(x)), n - 2)
    ratio = x - idx
    lat, lon = interpolate(stations[idx], stations[idx + 1], ratio)
    return lat, lon, stations[idx + 1].name


def simulate_line(line: MetroLine, now_min: float, headway_min: float) -> list[LiveTrain]:
    stations = line.stations
    duration = line_duration_minutes(line)
    slots = slot_count(duration, headway_min)
    if slots == 0:
        return []

    key = line.key or line.id
    reverse = tuple(reversed(stations))
    out: list[LiveTrain] = []

    for i in range(slots):
        offset = (now_min - i * headway_min) % duration
        # Always true after the modulo for a positive duration.
        if offset >= 0:
            lat, lon, next_name = _position(stations, offset, duration)
            out.append(
                LiveTrain(
                    id=f"{line.id}-up-{i}",
                    line=key,
                    direction=Direction.UP,
                    lat=lat,
                    lon=lon,
                    next_station=next_name,
                )
            )

        # DOWN trains run half a headway behind.
        offset = (now_min - (i * headway_min + headway_min / 2.0)) % duration
        if offset >= 0:
            lat, lon, next_name = _position(reverse, offset, duration)
            out.append(
                LiveTrain(
                    id=f"{line.id}-down-{i}",
                    line=key,
                    direction=Direction.DOWN,
                    lat=lat,
                    lon=lon,
                    next_station=next_name,
                )
            )

    return out


def simulate_live_trains(network: Network, now_min: float) -> tuple[LiveTrain, ...]:
    """All simulated trains at ``now_min`` minutes since midnight.

    Empty outside service hours. Train ids are ``{line}-{up|down}-{slot}`` and
    only stay stable while the headway regime does not change.
    """

    if not is_in_service(now_min):
        return ()

    headway = headway_minutes(now_min)
    trains: list[LiveTrain] = []
    for line in network.lines:
        trains.extend(simulate_line(line, now_min, headway))
    return tuple(trains)


def simulate_live_trains_at(network: Network, when: datetime) -> tuple[LiveTrain, ...]:
    return simulate_live_trains(network, minutes_since_midnight(when))
