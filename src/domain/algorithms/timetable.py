from __future__ import annotations

import math

from src.domain.exceptions import UnknownStation
from src.domain.models import (
    LineTimeline,
    MetroLine,
    Network,
    Station,
    StationTimetable,
    TimingSummary,
)

FIRST_DEPARTURE_MIN = 6 * 60 + 50
LAST_DEPARTURE_MIN = 21 * 60 + 30
SCHEDULE_END_MIN = 21 * 60 + 40
SCHEDULE_GRACE_MIN = 30
MINUTES_PER_STOP = 2.5
PEAK_STEP_MIN = 7
OFF_PEAK_STEP_MIN = 12


def station_offsets(line: MetroLine, station: Station) -> tuple[float, float]:
    """Running time from each terminus to ``station`` as (up, down) minutes."""

    idx = line.index_of(station.id)
    if idx is None:
        raise UnknownStation(station.id)
    n = len(line.stations)
    return idx * MINUTES_PER_STOP, (n - 1 - idx) * MINUTES_PER_STOP


def timing_summary(line: MetroLine, station: Station) -> TimingSummary:
    up, down = station_offsets(line, station)
    return TimingSummary(
        up_first=FIRST_DEPARTURE_MIN + up,
        up_last=LAST_DEPARTURE_MIN + up,
        down_first=FIRST_DEPARTURE_MIN + down,
        down_last=LAST_DEPARTURE_MIN + down,
    )


def _is_schedule_peak(minute: float) -> bool:
    hour = math.floor(minute / 60)
    return (9 <= hour < 11.5) or (17 <= hour < 20)


def departures(offset_min: float) -> tuple[float, ...]:
    """Full-day departures from the terminus shifted by ``offset_min``."""

    times: list[float] = []
    t = float(FIRST_DEPARTURE_MIN)
    while t <= SCHEDULE_END_MIN:
        times.append(t + offset_min)
        t += PEAK_STEP_MIN if _is_schedule_peak(t) else OFF_PEAK_STEP_MIN
    upper = SCHEDULE_END_MIN + SCHEDULE_GRACE_MIN
    return tuple(x for x in times if FIRST_DEPARTURE_MIN <= x <= upper)


def station_timetable(network: Network, station_id: str) -> StationTimetable:
    station = network.station(station_id)
    line = network.line_for_station(station_id)
    if line is None:
        raise UnknownStation(station_id)

    up, down = station_offsets(line, station)
    return StationTimetable(
        station=station,
        line=line,
        summary=timing_summary(line, station),
        up_departures=departures(up),
        down_departures=departures(down),
    )


def line_timeline(network: Network, line_id: str) -> LineTimeline:
    """First/last summary for every stop of ``line_id``, in UP order."""

    line = network.line(line_id)
    return LineTimeline(
        line=line,
        stops=tuple((s, timing_summary(line, s)) for s in line.stations),
    )


def format_clock(minutes: float) -> str:
    """12-hour clock label, e.g. ``410`` -> ``"6:50 AM"``."""

    h = int(math.floor(minutes / 60))
    m = int(math.floor(minutes % 60))
    suffix = "PM" if h >= 12 else "AM"
    return f"{h % 12 or 12}:{m:02d} {suffix}"
