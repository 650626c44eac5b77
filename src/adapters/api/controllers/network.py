from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from src.adapters.api.dependencies import get_station_service
from src.adapters.api.schemas.network import (
    DepartureBoardSchema,
    LineTimelineSchema,
    MetroLineSchema,
    NearestStationSchema,
    StationAccessRequestSchema,
    StationAccessSchema,
    StationTimetableSchema,
    TimelineStopSchema,
    TimingSummarySchema,
)
from src.adapters.api.schemas.routes import GeoPointSchema, StationSchema
from src.app.services.station_service import StationService
from src.domain.algorithms.timetable import format_clock
from src.domain.exceptions import EmptyNetwork, UnknownLine, UnknownStation
from src.domain.models import GeoPoint, MetroLine, Station, TimingSummary, TravelMode

router = APIRouter(tags=["network"])


def station_to_schema(s: Station) -> StationSchema:
    return StationSchema(
        id=s.id,
        name=s.name,
        lat=s.lat,
        lon=s.lon,
        line=s.line,
        is_interchange=s.is_interchange,
    )


def _summary_to_schemas(
    line: MetroLine, summary: TimingSummary
) -> tuple[TimingSummarySchema, TimingSummarySchema]:
    return (
        TimingSummarySchema(
            toward=line.terminus_up or "",
            first=format_clock(summary.up_first),
            last=format_clock(summary.up_last),
        ),
        TimingSummarySchema(
            toward=line.terminus_down or "",
            first=format_clock(summary.down_first),
            last=format_clock(summary.down_last),
        ),
    )


@router.get("/network/lines", response_model=list[MetroLineSchema])
def list_lines(
    service: StationService = Depends(get_station_service),
) -> list[MetroLineSchema]:
    return [
        MetroLineSchema(
            id=line.id,
            name=line.name,
            color=line.color,
            stations=[station_to_schema(s) for s in line.stations],
        )
        for line in service.list_lines()
    ]


@router.get("/network/lines/{line_id}/timeline", response_model=LineTimelineSchema)
def line_timeline(
    line_id: str,
    service: StationService = Depends(get_station_service),
) -> LineTimelineSchema:
    try:
        timeline = service.line_timeline(line_id)
    except UnknownLine as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    stops: list[TimelineStopSchema] = []
    for i, (station, summary) in enumerate(timeline.stops):
        up, down = _summary_to_schemas(timeline.line, summary)
        stops.append(
            TimelineStopSchema(
                station=station_to_schema(station),
                stop_number=i + 1,
                up=up,
                down=down,
            )
        )
    return LineTimelineSchema(
        line_id=timeline.line.id,
        name=timeline.line.name,
        color=timeline.line.color,
        stops=stops,
    )


@router.get("/network/stations", response_model=list[StationSchema])
def search_stations(
    q: str = Query(default=""),
    limit: int = Query(default=5, ge=1, le=500),
    service: StationService = Depends(get_station_service),
) -> list[StationSchema]:
    return [station_to_schema(s) for s in service.search(q, limit=limit)]


@router.get("/network/stations/nearest", response_model=NearestStationSchema)
def nearest_station(
    lat: float = Query(..., ge=-90.0, le=90.0),
    lon: float = Query(..., ge=-180.0, le=180.0),
    service: StationService = Depends(get_station_service),
) -> NearestStationSchema:
    try:
        nearest = service.nearest(GeoPoint(lat=lat, lon=lon))
    except EmptyNetwork as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return NearestStationSchema(
        station=station_to_schema(nearest.station),
        distance_km=nearest.distance_km,
    )


@router.get(
    "/network/stations/{station_id}/timetable",
    response_model=StationTimetableSchema,
)
def station_timetable(
    station_id: str,
    service: StationService = Depends(get_station_service),
) -> StationTimetableSchema:
    try:
        tt = service.timetable(station_id)
    except UnknownStation as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    toward_up = tt.line.terminus_up or ""
    toward_down = tt.line.terminus_down or ""
    return StationTimetableSchema(
        station=station_to_schema(tt.station),
        line_id=tt.line.id,
        line_color=tt.line.color,
        summary=list(_summary_to_schemas(tt.line, tt.summary)),
        schedule=[
            DepartureBoardSchema(
                toward=toward_up,
                departures=[format_clock(t) for t in tt.up_departures],
            ),
            DepartureBoardSchema(
                toward=toward_down,
                departures=[format_clock(t) for t in tt.down_departures],
            ),
        ],
    )


@router.post("/access/nearest", response_model=StationAccessSchema)
async def access_nearest(
    req: StationAccessRequestSchema,
    service: StationService = Depends(get_station_service),
) -> StationAccessSchema:
    point = GeoPoint(lat=req.location.lat, lon=req.location.lon)
    try:
        access = await service.access_nearest(point, mode=TravelMode(req.mode))
    except EmptyNetwork as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return StationAccessSchema(
        station=station_to_schema(access.station),
        distance_km=access.distance_km,
        mode=access.mode.value,
        eta_min=access.eta_min,
        path_distance_km=access.path_distance_km,
        path=[GeoPointSchema(lat=p.lat, lon=p.lon) for p in access.path],
    )
