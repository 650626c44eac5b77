from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from src.adapters.api.schemas.routes import GeoPointSchema, StationSchema


class MetroLineSchema(BaseModel):
    id: str
    name: str
    color: str
    stations: list[StationSchema]


class NearestStationSchema(BaseModel):
    station: StationSchema
    distance_km: float


class StationAccessRequestSchema(BaseModel):
    location: GeoPointSchema
    mode: Literal["walking", "driving"] = "walking"


class StationAccessSchema(BaseModel):
    station: StationSchema
    distance_km: float
    mode: Literal["walking", "driving"]
    eta_min: int
    path: list[GeoPointSchema]
    path_distance_km: float


class TimingSummarySchema(BaseModel):
    toward: str
    first: str
    last: str


class DepartureBoardSchema(BaseModel):
    toward: str
    departures: list[str]


class StationTimetableSchema(BaseModel):
    station: StationSchema
    line_id: str
    line_color: str
    summary: list[TimingSummarySchema]
    schedule: list[DepartureBoardSchema]


class TimelineStopSchema(BaseModel):
    station: StationSchema
    stop_number: int
    up: TimingSummarySchema
    down: TimingSummarySchema


class LineTimelineSchema(BaseModel):
    line_id: str
    name: str
    color: str
    stops: list[TimelineStopSchema]
