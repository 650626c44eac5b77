from __future__ import annotations

import pytest

from src.domain.algorithms.fares import calculate_fare


@pytest.mark.parametrize(
    ("distance_km", "fare"),
    [
        (0.0, 5),
        (2.0, 5),
        (2.01, 10),
        (5.0, 10),
        (10.0, 15),
        (15.0, 20),
        (20.0, 25),
        (25.0, 30),
        (250.0, 30),
    ],
)
def test_classic_table_for_blue_and_unspecified(distance_km: float, fare: int) -> None:
    assert calculate_fare(distance_km) == fare
    assert calculate_fare(distance_km, "Blue") == fare


@pytest.mark.parametrize(
    ("distance_km", "fare"),
    [
        (2.0, 5),
        (5.0, 10),
        (8.0, 20),
        (8.01, 30),
        (100.0, 30),
    ],
)
@pytest.mark.parametrize("line", ["Green", "Orange", "Purple", "Yellow"])
def test_slab_table_lines(line: str, distance_km: float, fare: int) -> None:
    assert calculate_fare(distance_km, line) == fare


def test_tables_are_distinct_between_8_and_20_km() -> None:
    assert calculate_fare(9.0, "Green") == 30
    assert calculate_fare(9.0, "Blue") == 15


def test_line_key_is_matched_exactly_and_unknown_uses_classic() -> None:
    assert calculate_fare(7.0, "Green") == 20
    assert calculate_fare(7.0, "green") == 15
    assert calculate_fare(7.0, " Green") == 15
    assert calculate_fare(7.0, "Pink") == 15


def test_negative_distance_is_lowest_band() -> None:
    assert calculate_fare(-3.0) == 5
    assert calculate_fare(-3.0, "Green") == 5


@pytest.mark.parametrize("line", [None, "Blue", "Green"])
def test_fare_is_monotonic(line: str | None) -> None:
    distances = [x / 4.0 for x in range(0, 120)]
    fares = [calculate_fare(d, line) for d in distances]
    assert fares == sorted(fares)
