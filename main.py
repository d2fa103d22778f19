"""CLI entrypoint demonstrating fluent car construction."""

from __future__ import annotations

import logging
import os
import sys

from car_builder.core.builder import CarBuilder
from car_builder.core.engine import DieselEngine, SportEngine


def main() -> None:
    """Build a sports car and a family car and print both."""
    level = getattr(logging, os.getenv("LOG_LEVEL", "WARNING").upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    sports_car = (
        CarBuilder()
        .set_seats(2)
        .set_engine(SportEngine())
        .set_gps(True)
        .set_trip_computer(True)
        .build()
    )

    family_car = (
        CarBuilder()
        .set_seats(5)
        .set_engine(DieselEngine())
        .set_gps(False)
        .set_trip_computer(False)
        .build()
    )

    print(sports_car)
    print(family_car)


if __name__ == "__main__":
    sys.exit(main() or 0)
