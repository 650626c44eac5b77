from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.adapters.api.controllers.network import station_to_schema
from src.adapters.api.dependencies import (
    get_journey_planner_service,
    get_road_route_provider,
)
from src.adapters.api.schemas.routes import (
    FareSchema,
    GeoPointSchema,
    JourneyLegSchema,
    JourneySchema,
    RoadRouteRequestSchema,
    RoadRouteSchema,
)
from src.app.ports.output import IRoadRouteProvider
from src.app.services.journey_planner_service import JourneyPlannerService
from src.domain.models import GeoPoint, Journey, TravelMode

router = APIRouter(tags=["routes"])


def _journey_to_schema(journey: Journey) -> JourneySchema:
    return JourneySchema(
        origin=station_to_schema(journey.origin) if journey.origin else None,
        destination=(
            station_to_schema(journey.destination) if journey.destination else None
        ),
        found=journey.found,
        legs=[
            JourneyLegSchema(
                line=leg.line,
                color=leg.color,
                direction=leg.direction,
                distance_km=leg.distance_km,
                fare=leg.fare,
                stops=leg.stops,
                stations=[station_to_schema(s) for s in leg.stations],
            )
            for leg in journey.legs
        ],
        total_distance_km=journey.total_distance_km,
        total_fare=journey.total_fare,
        total_time_min=journey.total_time_min,
        total_stops=journey.total_stops,
        transfers=journey.transfers,
    )


@router.get("/journeys", response_model=JourneySchema)
def plan_journey(
    from_id: str = Query(...),
    to_id: str = Query(...),
    service: JourneyPlannerService = Depends(get_journey_planner_service),
) -> JourneySchema:
    # Unknown ids are not an error: the journey simply has no legs.
    return _journey_to_schema(service.plan(from_id=from_id, to_id=to_id))


@router.get("/fares", response_model=FareSchema)
def get_fare(
    distance_km: float = Query(..., allow_inf_nan=False),
    line: str | None = Query(default=None),
    service: JourneyPlannerService = Depends(get_journey_planner_service),
) -> FareSchema:
    return FareSchema(
        distance_km=distance_km,
        line=line,
        fare=service.fare(distance_km=distance_km, line=line),
    )


@router.post("/road-route", response_model=RoadRouteSchema)
async def road_route(
    req: RoadRouteRequestSchema,
    provider: IRoadRouteProvider = Depends(get_road_route_provider),
) -> RoadRouteSchema:
    points = await provider.road_route(
        GeoPoint(lat=req.start.lat, lon=req.start.lon),
        GeoPoint(lat=req.end.lat, lon=req.end.lon),
        TravelMode(req.mode),
    )
    return RoadRouteSchema(
        mode=req.mode,
        points=[GeoPointSchema(lat=p.lat, lon=p.lon) for p in points],
    )
