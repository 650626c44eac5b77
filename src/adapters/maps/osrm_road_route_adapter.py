from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

import httpx

from src.app.ports.output import IRoadRouteProvider
from src.domain.models import GeoPoint, TravelMode

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://router.project-osrm.org"

PROFILES: dict[TravelMode, str] = {
    TravelMode.WALKING: "foot",
    TravelMode.DRIVING: "car",
}


def _parse_geojson_route(payload: Any) -> tuple[GeoPoint, ...]:
    routes = payload.get("routes") if isinstance(payload, dict) else None
    if not routes:
        return ()

    coords = routes[0]["geometry"]["coordinates"]
    # GeoJSON order is [lon, lat].
    return tuple(GeoPoint(lat=float(c[1]), lon=float(c[0])) for c in coords)


@dataclass(slots=True)
class OsrmRoadRouteAdapter(IRoadRouteProvider):
    """Road geometry from an OSRM-compatible HTTP routing service.

    Any failure degrades to a straight line between the two points.

    Env vars:
      - ROAD_ROUTE_BASE_URL: service root (default: public OSRM demo server)
      - ROAD_ROUTE_TIMEOUT_S: request timeout; unset means no timeout
    """

    base_url: str | None = None
    timeout_s: float | None = None
    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        if self.base_url is None:
            self.base_url = os.getenv("ROAD_ROUTE_BASE_URL") or DEFAULT_BASE_URL
        if self.timeout_s is None and os.getenv("ROAD_ROUTE_TIMEOUT_S"):
            self.timeout_s = float(os.environ["ROAD_ROUTE_TIMEOUT_S"])

    def _url(self, start: GeoPoint, end: GeoPoint, mode: TravelMode) -> str:
        profile = PROFILES[TravelMode(mode)]
        base = (self.base_url or DEFAULT_BASE_URL).rstrip("/")
        return (
            f"{base}/route/v1/{profile}/"
            f"{start.lon},{start.lat};{end.lon},{end.lat}"
        )

    async def road_route(
        self, start: GeoPoint, end: GeoPoint, mode: TravelMode
    ) -> tuple[GeoPoint, ...]:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_s, transport=self.transport
            ) as client:
                resp = await client.get(
                    self._url(start, end, mode),
                    params={"overview": "full", "geometries": "geojson"},
                )
                resp.raise_for_status()
                points = _parse_geojson_route(resp.json())
            if len(points) >= 2:
                return points
            logger.warning("Road route returned no geometry; using straight line")
        except Exception as exc:
            logger.warning("Road route failed (%s); using straight line", exc)

        return (start, end)
