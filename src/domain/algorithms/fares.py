from __future__ import annotations

# Two distinct tariff policies. Upper bounds are inclusive; anything beyond the
# last band pays the cap.
# Line keys are matched exactly, as stations carry them.
SLAB_LINES = frozenset({"Green", "Orange", "Purple", "Yellow"})

SLAB_TARIFF: tuple[tuple[float, int], ...] = (
    (2.0, 5),
    (5.0, 10),
    (8.0, 20),
)
SLAB_CAP = 30

CLASSIC_TARIFF: tuple[tuple[float, int], ...] = (
    (2.0, 5),
    (5.0, 10),
    (10.0, 15),
    (15.0, 20),
    (20.0, 25),
)
CLASSIC_CAP = 30


def tariff_for_line(
    line: str | None,
) -> tuple[tuple[tuple[float, int], ...], int]:
    if line in SLAB_LINES:
        return SLAB_TARIFF, SLAB_CAP
    return CLASSIC_TARIFF, CLASSIC_CAP


def calculate_fare(distance_km: float, line: str | None = None) -> int:
    """Fare in currency units for a single-line ride of ``distance_km``.

    Blue, unknown and unspecified lines use the classic table.
    """

    bands, cap = tariff_for_line(line)
    for upper_km, fare in bands:
        if distance_km <= upper_km:
            return fare
    return cap
