from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import GeoPoint, TravelMode


class IRoadRouteProvider(ABC):
    """Port for street-level paths between two points."""

    @abstractmethod
    async def road_route(
        self, start: GeoPoint, end: GeoPoint, mode: TravelMode
    ) -> tuple[GeoPoint, ...]:
        """Return a polyline from start to end. Must not raise."""
