"""Fluent builder for :class:`Car` instances.

Setters store values as given and return the builder so calls can be
chained.  Nothing is validated until :meth:`CarBuilder.build`, which may
be called any number of times; each call checks the state staged at that
moment and returns an independent car.
"""

from __future__ import annotations

import logging

from car_builder.core.car import Car
from car_builder.core.engine import Engine

logger = logging.getLogger(__name__)


class CarBuilder:
    """Mutable staging area for a :class:`Car`.

    Attributes:
        seats: Staged seat count.  Defaults to 0, which fails validation.
        engine: Staged engine.  Defaults to ``None``, which fails validation.
        has_gps: Staged GPS flag.
        has_trip_computer: Staged trip computer flag.
    """

    __slots__ = ("seats", "engine", "has_gps", "has_trip_computer")

    def __init__(self) -> None:
        self.seats: int = 0
        self.engine: Engine | None = None
        self.has_gps: bool = False
        self.has_trip_computer: bool = False

    def set_seats(self, seats: int) -> CarBuilder:
        self.seats = seats
        return self

    def set_engine(self, engine: Engine | None) -> CarBuilder:
        self.engine = engine
        return self

    def set_gps(self, has_gps: bool) -> CarBuilder:
        self.has_gps = has_gps
        return self

    def set_trip_computer(self, has_trip_computer: bool) -> CarBuilder:
        self.has_trip_computer = has_trip_computer
        return self

    def build(self) -> Car:
        """Finalize the staged state into an immutable car.

        Returns:
            A new :class:`Car` holding the currently staged values.

        Raises:
            InvalidConstructionState: If no engine is set ("Engine must be
                set!") or the seat count is not positive ("Seats must be
                greater than 0!").  The engine check runs first.
        """
        car = Car(
            seats=self.seats,
            engine=self.engine,  # type: ignore[arg-type]
            has_gps=self.has_gps,
            has_trip_computer=self.has_trip_computer,
        )
        logger.debug("Built %s", car)
        return car

    def __repr__(self) -> str:
        engine = self.engine.get_type() if self.engine is not None else None
        return (
            f"CarBuilder(seats={self.seats!r}, engine={engine!r}, "
            f"has_gps={self.has_gps!r}, has_trip_computer={self.has_trip_computer!r})"
        )
