"""Tabular summaries of built cars."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import pandas as pd

from car_builder.core.car import Car

FLEET_COLUMNS: list[str] = ["seats", "engine", "has_gps", "has_trip_computer"]


def fleet_frame(cars: Iterable[Car] | Mapping[str, Car]) -> pd.DataFrame:
    """Tabulate cars as a DataFrame, one row per car.

    Args:
        cars: Cars to summarise.  When a mapping is given, its keys
            become the row index.

    Returns:
        A :class:`pandas.DataFrame` with columns ``seats``, ``engine``
        (the engine label), ``has_gps`` and ``has_trip_computer``.
    """
    index: list[str] | None = None
    if isinstance(cars, Mapping):
        index = list(cars.keys())
        cars = list(cars.values())

    rows = [
        {
            "seats": car.seats,
            "engine": car.engine.get_type(),
            "has_gps": car.has_gps,
            "has_trip_computer": car.has_trip_computer,
        }
        for car in cars
    ]
    return pd.DataFrame(rows, columns=FLEET_COLUMNS, index=index)
