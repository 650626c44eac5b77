from __future__ import annotations

from dataclasses import dataclass, field

import networkx as nx

from src.app.ports.output import INetworkRepository
from src.domain.algorithms.fares import calculate_fare
from src.domain.algorithms.route_planner import build_station_graph, find_route
from src.domain.models import Journey, JourneyLeg, Network


@dataclass(slots=True)
class JourneyPlannerService:
    """Use case: plan a metro journey between two station ids.

    The station graph is built once per service; the network never changes
    at runtime.
    """

    network_repository: INetworkRepository

    _graph: nx.DiGraph | None = field(default=None, init=False, repr=False)

    def _network(self) -> Network:
        return self.network_repository.load_network()

    def _station_graph(self) -> nx.DiGraph:
        if self._graph is None:
            self._graph = build_station_graph(self._network())
        return self._graph

    def legs(self, *, from_id: str, to_id: str) -> tuple[JourneyLeg, ...]:
        return find_route(self._network(), from_id, to_id, graph=self._station_graph())

    def plan(self, *, from_id: str, to_id: str) -> Journey:
        """Plan a journey. Unknown ids produce a journey without legs."""

        network = self._network()
        return Journey(
            origin=network.find_station(from_id),
            destination=network.find_station(to_id),
            legs=self.legs(from_id=from_id, to_id=to_id),
        )

    def fare(self, *, distance_km: float, line: str | None = None) -> int:
        return calculate_fare(distance_km, line)
