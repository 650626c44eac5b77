from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class LiveTrainSchema(BaseModel):
    id: str
    line: str
    direction: Literal["UP", "DOWN"]
    lat: float
    lon: float
    next_station: str


class LiveTrainsResponseSchema(BaseModel):
    fetched_at: datetime
    trains: list[LiveTrainSchema]
