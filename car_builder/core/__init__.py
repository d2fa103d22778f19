"""Core construction modules for the car builder."""

from car_builder.core.builder import CarBuilder
from car_builder.core.car import Car, InvalidConstructionState
from car_builder.core.engine import (
    ENGINE_TYPES,
    DieselEngine,
    Engine,
    SportEngine,
    engine_from_name,
)

__all__ = [
    "Car",
    "CarBuilder",
    "DieselEngine",
    "ENGINE_TYPES",
    "Engine",
    "InvalidConstructionState",
    "SportEngine",
    "engine_from_name",
]
