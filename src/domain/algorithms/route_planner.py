"""Minimum-hop routing over the station graph.

Every edge is one hop, whether it is a ride to the next station or a walking
transfer between two same-name platforms. Breadth-first search therefore
returns the route with the fewest hops, which is not necessarily the shortest
in distance or the cheapest. Switching to a weighted search would be a
behavior change and must be done explicitly.
"""

from __future__ import annotations

import networkx as nx

from src.domain.models import Journey, JourneyLeg, Network, Station

from .fares import calculate_fare
from .geo_utils import haversine_distance_km

# Tracks are not straight lines.
TRACK_CURVATURE_FACTOR = 1.15


def build_station_graph(network: Network) -> nx.DiGraph:
    """Adjacency over integer station handles (indexes into all_stations).

    Both directions of every link are stored explicitly so that each node's
    successor order is: previous station, next station, then same-name
    transfers in network order. BFS results depend on that order.
    """

    stations = network.all_stations
    by_name: dict[str, list[int]] = {}
    for h, s in enumerate(stations):
        by_name.setdefault(s.name, []).append(h)

    g = nx.DiGraph()
    g.add_nodes_from(range(len(stations)))

    base = 0
    for line in network.lines:
        n = len(line.stations)
        for i, s in enumerate(line.stations):
            h = base + i
            if i > 0:
                g.add_edge(h, h - 1)
            if i < n - 1:
                g.add_edge(h, h + 1)
            for other in by_name[s.name]:
                if stations[other].id != s.id:
                    g.add_edge(h, other)
        base += n

    return g


def shortest_hop_path(graph: nx.DiGraph, source: int, target: int) -> list[int]:
    """BFS from source; returns handles source..target, or [] if unreachable."""

    if source == target:
        return [source]

    # Parents are fixed on first discovery, in successor order.
    preds = dict(nx.bfs_predecessors(graph, source))
    if target not in preds:
        return []

    path = [target]
    while path[-1] != source:
        path.append(preds[path[-1]])
    path.reverse()
    return path


def split_into_legs(path: list[Station]) -> list[list[Station]]:
    """Cut a station path at each interchange transfer.

    The station after the transfer opens the next leg. Single-station legs
    (no movement) are dropped.
    """

    if not path:
        return []

    runs: list[list[Station]] = []
    current: list[Station] = [path[0]]
    for prev, curr in zip(path, path[1:]):
        if prev.name == curr.name and prev.id != curr.id:
            if len(current) > 1:
                runs.append(current)
            current = [curr]
        else:
            current.append(curr)
    if len(current) > 1:
        runs.append(current)
    return runs


def make_leg(network: Network, stations: list[Station]) -> JourneyLeg:
    distance = 0.0
    for a, b in zip(stations, stations[1:]):
        distance += haversine_distance_km(a, b) * TRACK_CURVATURE_FACTOR

    line = stations[0].line
    return JourneyLeg(
        line=line,
        color=network.line_color(line),
        stations=tuple(stations),
        direction=stations[-1].name,
        distance_km=float(distance),
        fare=calculate_fare(distance, line),
    )


def find_route(
    network: Network,
    origin: Station | str,
    destination: Station | str,
    *,
    graph: nx.DiGraph | None = None,
) -> tuple[JourneyLeg, ...]:
    """Legs of the minimum-hop route between two stations.

    Unknown station ids, identical endpoints and unreachable targets all
    yield an empty tuple.
    """

    origin_id = origin if isinstance(origin, str) else origin.id
    destination_id = destination if isinstance(destination, str) else destination.id

    source = network.handle_of(origin_id)
    target = network.handle_of(destination_id)
    if source is None or target is None or source == target:
        return ()

    if graph is None:
        graph = build_station_graph(network)

    handles = shortest_hop_path(graph, source, target)
    stations = [network.all_stations[h] for h in handles]
    return tuple(make_leg(network, run) for run in split_into_legs(stations))


def plan_journey(
    network: Network,
    origin: Station,
    destination: Station,
    *,
    graph: nx.DiGraph | None = None,
) -> Journey:
    legs = find_route(network, origin, destination, graph=graph)
    return Journey(origin=origin, destination=destination, legs=legs)
