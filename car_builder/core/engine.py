"""Engine variants for the car builder.

An engine exposes a single capability: a human-readable type label.
Variants carry no state, so two engines of the same variant are equal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Engine(ABC):
    """Abstract engine contract."""

    @abstractmethod
    def get_type(self) -> str:
        """Return the human-readable engine label."""
        raise NotImplementedError


@dataclass(frozen=True)
class SportEngine(Engine):
    """High-output engine for two-seaters."""

    def get_type(self) -> str:
        return "Sport Engine"


@dataclass(frozen=True)
class DieselEngine(Engine):
    """Economy engine for family cars."""

    def get_type(self) -> str:
        return "Diesel Engine"


# ---------------------------------------------------------------------------
# Name registry
# ---------------------------------------------------------------------------

ENGINE_TYPES: dict[str, type[Engine]] = {
    "sport": SportEngine,
    "diesel": DieselEngine,
}


def engine_from_name(name: str) -> Engine:
    """Create an engine from its registered short name.

    Args:
        name: Registry key such as ``"sport"`` or ``"diesel"``.  Matching
            ignores case and surrounding whitespace.

    Returns:
        A fresh :class:`Engine` instance of the matching variant.

    Raises:
        ValueError: If no engine is registered under ``name``.
    """
    key = name.strip().lower()
    if key not in ENGINE_TYPES:
        known = ", ".join(sorted(ENGINE_TYPES))
        raise ValueError(f"Unknown engine '{name}'; expected one of: {known}")
    return ENGINE_TYPES[key]()
