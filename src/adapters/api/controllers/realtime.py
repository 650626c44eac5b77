from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import get_live_train_service
from src.adapters.api.schemas.realtime import LiveTrainSchema, LiveTrainsResponseSchema
from src.app.services.live_train_service import LiveTrainService

router = APIRouter(prefix="/realtime", tags=["realtime"])


@router.get("/trains", response_model=LiveTrainsResponseSchema)
async def list_trains(
    line: list[str] | None = Query(default=None),
    at: datetime | None = Query(default=None),
    service: LiveTrainService = Depends(get_live_train_service),
) -> LiveTrainsResponseSchema:
    lines = set(line) if line else None

    # Positions are a function of metro-local wall-clock time; clients poll.
    trains = await service.list_trains(now=at, lines=lines)

    return LiveTrainsResponseSchema(
        fetched_at=datetime.now(timezone.utc),
        trains=[
            LiveTrainSchema(
                id=t.id,
                line=t.line,
                direction=t.direction.value,
                lat=t.lat,
                lon=t.lon,
                next_station=t.next_station,
            )
            for t in trains
        ],
    )
