from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.exceptions import UnknownLine, UnknownStation

DEFAULT_LINE_COLOR = "#64748b"


@dataclass(frozen=True, slots=True)
class Station:
    """A line-specific station node.

    The same physical interchange appears once per line it serves, each time
    with its own id and the same display name.
    """

    id: str
    name: str
    lat: float
    lon: float
    line: str  # line key, e.g. "Blue"
    is_interchange: bool = False


@dataclass(frozen=True, slots=True)
class MetroLine:
    """A metro line. Station order is the UP direction; reverse is DOWN."""

    id: str
    name: str
    color: str  # hex with '#'
    stations: tuple[Station, ...] = ()

    @property
    def key(self) -> str | None:
        return self.stations[0].line if self.stations else None

    @property
    def terminus_up(self) -> str | None:
        return self.stations[-1].name if self.stations else None

    @property
    def terminus_down(self) -> str | None:
        return self.stations[0].name if self.stations else None

    def index_of(self, station_id: str) -> int | None:
        for i, s in enumerate(self.stations):
            if s.id == station_id:
                return i
        return None


@dataclass(frozen=True, slots=True)
class Network:
    """Immutable network table: lines in declared order."""

    lines: tuple[MetroLine, ...]

    _stations: tuple[Station, ...] = field(init=False, repr=False, compare=False)
    _by_id: dict[str, int] = field(init=False, repr=False, compare=False)
    _colors: dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        stations = tuple(s for line in self.lines for s in line.stations)
        by_id: dict[str, int] = {}
        for i, s in enumerate(stations):
            by_id.setdefault(s.id, i)

        colors: dict[str, str] = {}
        for line in self.lines:
            if line.key is not None:
                colors.setdefault(line.key, line.color)

        # Frozen dataclass: derived indexes are set once here.
        object.__setattr__(self, "_stations", stations)
        object.__setattr__(self, "_by_id", by_id)
        object.__setattr__(self, "_colors", colors)

    @property
    def all_stations(self) -> tuple[Station, ...]:
        return self._stations

    def handle_of(self, station_id: str) -> int | None:
        return self._by_id.get(station_id)

    def find_station(self, station_id: str) -> Station | None:
        i = self._by_id.get(station_id)
        return None if i is None else self._stations[i]

    def station(self, station_id: str) -> Station:
        found = self.find_station(station_id)
        if found is None:
            raise UnknownStation(station_id)
        return found

    def line(self, line_id: str) -> MetroLine:
        for line in self.lines:
            if line.id == line_id:
                return line
        raise UnknownLine(line_id)

    def line_for_station(self, station_id: str) -> MetroLine | None:
        for line in self.lines:
            if line.index_of(station_id) is not None:
                return line
        return None

    def line_color(self, line_key: str) -> str:
        return self._colors.get(line_key, DEFAULT_LINE_COLOR)
