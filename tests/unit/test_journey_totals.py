from __future__ import annotations

from src.domain.algorithms.fares import calculate_fare
from src.domain.models import Journey, JourneyLeg, Station


def _leg(line: str, distance_km: float, n_stations: int = 2) -> JourneyLeg:
    stations = tuple(
        Station(id=f"{line}{i}", name=f"{line} {i}", lat=0.0, lon=i / 100, line=line)
        for i in range(n_stations)
    )
    return JourneyLeg(
        line=line,
        color="#000000",
        stations=stations,
        direction=stations[-1].name,
        distance_km=distance_km,
        fare=calculate_fare(distance_km, line),
    )


def test_single_leg_time_uses_boarding_allowance_and_rounds_half_up() -> None:
    # 3 km * 2.5 + 5 = 12.5 -> 13
    j = Journey(origin=None, destination=None, legs=(_leg("Blue", 3.0),))
    assert j.total_time_min == 13
    assert j.transfers == 0


def test_multi_leg_time_uses_transfer_penalty() -> None:
    # (0.5 + 0.5) * 2.5 + 8 = 10.5 -> 11
    j = Journey(
        origin=None,
        destination=None,
        legs=(_leg("Blue", 0.5), _leg("Green", 0.5)),
    )
    assert j.total_time_min == 11
    assert j.transfers == 1


def test_fare_is_charged_per_leg_not_per_journey() -> None:
    legs = (_leg("Blue", 1.0), _leg("Green", 1.0), _leg("Orange", 1.0))
    j = Journey(origin=None, destination=None, legs=legs)

    assert j.total_fare == 15
    # A single whole-journey lookup would have been cheaper.
    assert calculate_fare(j.total_distance_km) == 10


def test_stop_count_does_not_double_count_transfer_station() -> None:
    j = Journey(
        origin=None,
        destination=None,
        legs=(_leg("Blue", 1.0, n_stations=4), _leg("Green", 1.0, n_stations=3)),
    )
    assert j.total_stops == 3 + 2


def test_empty_journey() -> None:
    j = Journey(origin=None, destination=None)
    assert not j.found
    assert j.total_fare == 0
    assert j.total_distance_km == 0.0
    assert j.total_stops == 0
