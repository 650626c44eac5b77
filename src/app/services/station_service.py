from __future__ import annotations

import math
from dataclasses import dataclass

from src.app.ports.output import INetworkRepository, IRoadRouteProvider
from src.domain.algorithms.geo_utils import polyline_distance_km
from src.domain.algorithms.nearest import find_nearest_to_point, search_stations
from src.domain.algorithms.timetable import line_timeline, station_timetable
from src.domain.models import (
    GeoPoint,
    LineTimeline,
    MetroLine,
    NearestStation,
    Station,
    StationAccess,
    StationTimetable,
    TravelMode,
)

# km/h used for the access ETA.
ACCESS_SPEED_KMH: dict[TravelMode, float] = {
    TravelMode.WALKING: 4.5,
    TravelMode.DRIVING: 20.0,
}


@dataclass(slots=True)
class StationService:
    """Station lookup, search, timetable and nearest-station access."""

    network_repository: INetworkRepository
    road_route_provider: IRoadRouteProvider | None = None

    def list_lines(self) -> tuple[MetroLine, ...]:
        return self.network_repository.load_network().lines

    def get_station(self, station_id: str) -> Station:
        return self.network_repository.load_network().station(station_id)

    def search(self, query: str, *, limit: int = 5) -> list[Station]:
        network = self.network_repository.load_network()
        return search_stations(network.all_stations, query, limit=limit)

    def nearest(self, point: GeoPoint) -> NearestStation:
        network = self.network_repository.load_network()
        return find_nearest_to_point(network.all_stations, point)

    def timetable(self, station_id: str) -> StationTimetable:
        return station_timetable(self.network_repository.load_network(), station_id)

    def line_timeline(self, line_id: str) -> LineTimeline:
        return line_timeline(self.network_repository.load_network(), line_id)

    async def access_nearest(
        self, point: GeoPoint, *, mode: TravelMode = TravelMode.WALKING
    ) -> StationAccess:
        if self.road_route_provider is None:
            raise RuntimeError("Road route provider not configured")

        nearest = self.nearest(point)
        target = GeoPoint.of(nearest.station)
        path = await self.road_route_provider.road_route(point, target, mode)

        speed = ACCESS_SPEED_KMH[TravelMode(mode)]
        eta = int(math.ceil(nearest.distance_km / speed * 60.0))
        return StationAccess(
            station=nearest.station,
            distance_km=nearest.distance_km,
            mode=TravelMode(mode),
            path=tuple(path),
            path_distance_km=polyline_distance_km(path),
            eta_min=eta,
        )
