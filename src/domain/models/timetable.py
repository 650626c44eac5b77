from __future__ import annotations

from dataclasses import dataclass

from .network import MetroLine, Station


@dataclass(frozen=True, slots=True)
class TimingSummary:
    """First and last departures, in minutes since midnight."""

    up_first: float
    up_last: float
    down_first: float
    down_last: float


@dataclass(frozen=True, slots=True)
class StationTimetable:
    station: Station
    line: MetroLine
    summary: TimingSummary
    up_departures: tuple[float, ...] = ()
    down_departures: tuple[float, ...] = ()


@dataclass(frozen=True, slots=True)
class LineTimeline:
    """First/last departures toward both termini for every stop of a line."""

    line: MetroLine
    stops: tuple[tuple[Station, TimingSummary], ...] = ()
