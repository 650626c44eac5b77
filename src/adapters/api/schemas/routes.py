from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class StationSchema(BaseModel):
    id: str
    name: str
    lat: float
    lon: float
    line: str
    is_interchange: bool = False


class JourneyLegSchema(BaseModel):
    line: str
    color: str
    direction: str
    distance_km: float
    fare: int
    stops: int
    stations: list[StationSchema]


class JourneySchema(BaseModel):
    origin: StationSchema | None = None
    destination: StationSchema | None = None
    found: bool
    legs: list[JourneyLegSchema] = []

    total_distance_km: float
    total_fare: int
    total_time_min: int
    total_stops: int
    transfers: int


class FareSchema(BaseModel):
    distance_km: float
    line: str | None = None
    fare: int


class RoadRouteRequestSchema(BaseModel):
    start: GeoPointSchema
    end: GeoPointSchema
    mode: Literal["walking", "driving"] = "walking"


class RoadRouteSchema(BaseModel):
    mode: Literal["walking", "driving"]
    points: list[GeoPointSchema]
