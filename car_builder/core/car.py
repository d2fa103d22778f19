"""Immutable car model produced by :class:`~car_builder.core.builder.CarBuilder`."""

from __future__ import annotations

from dataclasses import dataclass

from car_builder.core.engine import Engine


class InvalidConstructionState(ValueError):
    """Raised when a car is finalized from incomplete or invalid state."""


@dataclass(frozen=True)
class Car:
    """A fully configured car.

    Instances are created through :class:`CarBuilder` and never change
    afterwards.

    Attributes:
        seats: Number of passenger seats (> 0).
        engine: The fitted engine.
        has_gps: Whether satellite navigation is installed.
        has_trip_computer: Whether a trip computer is installed.
    """

    seats: int
    engine: Engine
    has_gps: bool = False
    has_trip_computer: bool = False

    def __post_init__(self) -> None:
        """Validate construction state.  The engine is checked first."""
        if self.engine is None:
            raise InvalidConstructionState("Engine must be set!")
        # bool is an int subclass and would render as seats=True.
        if isinstance(self.seats, bool) or self.seats <= 0:
            raise InvalidConstructionState("Seats must be greater than 0!")

    def __str__(self) -> str:
        return (
            f"Car{{seats={self.seats}, "
            f"engine={self.engine.get_type()}, "
            f"hasGPS={_flag(self.has_gps)}, "
            f"hasTripComputer={_flag(self.has_trip_computer)}}}"
        )


def _flag(value: bool) -> str:
    return "true" if value else "false"
