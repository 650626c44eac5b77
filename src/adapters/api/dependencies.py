from __future__ import annotations

import os

from src.adapters.maps.osrm_road_route_adapter import OsrmRoadRouteAdapter
from src.adapters.persistence import BuiltinNetworkRepository, JsonNetworkRepository
from src.app.ports.output import INetworkRepository, IRoadRouteProvider
from src.app.services.journey_planner_service import JourneyPlannerService
from src.app.services.live_train_service import DEFAULT_TIMEZONE, LiveTrainService
from src.app.services.station_service import StationService


def get_network_repository() -> INetworkRepository:
    if os.getenv("METRO_NETWORK_PATH"):
        return JsonNetworkRepository()
    return BuiltinNetworkRepository()


def get_journey_planner_service() -> JourneyPlannerService:
    return JourneyPlannerService(network_repository=get_network_repository())


def get_road_route_provider() -> IRoadRouteProvider:
    return OsrmRoadRouteAdapter()


def get_live_train_service() -> LiveTrainService:
    # No live-position feed is wired in; trains come from the simulator.
    return LiveTrainService(
        network_repository=get_network_repository(),
        timezone=os.getenv("METRO_TIMEZONE") or DEFAULT_TIMEZONE,
    )


def get_station_service() -> StationService:
    return StationService(
        network_repository=get_network_repository(),
        road_route_provider=get_road_route_provider(),
    )
