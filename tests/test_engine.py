"""Tests for engine variants and the engine name registry."""

import pytest

from car_builder.core.engine import (
    ENGINE_TYPES,
    DieselEngine,
    Engine,
    SportEngine,
    engine_from_name,
)


def test_engine_labels() -> None:
    """Each variant must report its fixed label."""
    assert SportEngine().get_type() == "Sport Engine"
    assert DieselEngine().get_type() == "Diesel Engine"


def test_engines_equal_by_variant() -> None:
    """Stateless engines of the same variant compare and hash equal."""
    assert SportEngine() == SportEngine()
    assert hash(DieselEngine()) == hash(DieselEngine())
    assert SportEngine() != DieselEngine()


def test_engine_contract_is_abstract() -> None:
    """The base contract cannot be instantiated without get_type."""
    with pytest.raises(TypeError):
        Engine()  # type: ignore[abstract]


def test_custom_engine_variant() -> None:
    """Any subclass implementing get_type is a valid engine."""

    class ElectricEngine(Engine):
        def get_type(self) -> str:
            return "Electric Engine"

    assert ElectricEngine().get_type() == "Electric Engine"


def test_engine_from_name_resolves_registry() -> None:
    """Every registered name must produce its variant."""
    for name, cls in ENGINE_TYPES.items():
        engine = engine_from_name(name)
        assert isinstance(engine, cls)


def test_engine_from_name_normalises_input() -> None:
    """Lookup ignores case and surrounding whitespace."""
    assert engine_from_name("  Sport ") == SportEngine()
    assert engine_from_name("DIESEL") == DieselEngine()


def test_engine_from_name_rejects_unknown() -> None:
    """Unknown names must list the registered engines."""
    with pytest.raises(ValueError, match="diesel, sport"):
        engine_from_name("rotary")
