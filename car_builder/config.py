"""Preset loader for named car configurations."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from car_builder.core.builder import CarBuilder
from car_builder.core.car import Car
from car_builder.core.engine import engine_from_name

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
PRESETS_PATH: Path = DATA_DIR / "car_presets.yaml"

_REQUIRED_FIELDS: tuple[str, ...] = ("name", "seats", "engine")
_FLAG_FIELDS: tuple[str, ...] = ("gps", "trip_computer")


def load_presets(path: Path | None = None) -> dict[str, Car]:
    """Load named car presets from a YAML file.

    Each entry is validated and finalized through :class:`CarBuilder`.

    Args:
        path: Optional override for the presets file path.

    Returns:
        Mapping of preset name to :class:`Car`, in file order.

    Raises:
        FileNotFoundError: If the presets file does not exist.
        ValueError: If an entry is missing fields, has wrongly typed
            values, names an unknown engine, or repeats a preset name.
        InvalidConstructionState: If an entry has a non-positive seat count.
    """
    presets_path = path or PRESETS_PATH
    if not presets_path.exists():
        raise FileNotFoundError(f"Presets file not found: {presets_path}")

    with open(presets_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise ValueError(
            f"Presets file must hold a mapping, got {type(data).__name__}"
        )

    entries: list[dict] = data.get("cars") or []
    if not isinstance(entries, list):
        raise ValueError(f"'cars' must be a list, got {type(entries).__name__}")

    presets: dict[str, Car] = {}

    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(
                f"Preset entry {idx}: expected a mapping, got {type(entry).__name__}"
            )

        # --- Validate required fields ---
        for field in _REQUIRED_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Preset entry {idx} ({entry.get('name', '<unknown>')}) "
                    f"is missing required field '{field}'"
                )

        name = str(entry["name"])
        if name in presets:
            raise ValueError(f"Preset entry {idx}: duplicate name '{name}'")

        # bool is an int subclass, so reject it explicitly.
        seats = entry["seats"]
        if isinstance(seats, bool) or not isinstance(seats, int):
            raise ValueError(
                f"Preset entry {idx} ({name}): "
                f"'seats' must be an integer, got {type(seats).__name__}"
            )

        for field in _FLAG_FIELDS:
            val = entry.get(field, False)
            if not isinstance(val, bool):
                raise ValueError(
                    f"Preset entry {idx} ({name}): "
                    f"'{field}' must be a boolean, got {type(val).__name__}"
                )

        try:
            engine = engine_from_name(str(entry["engine"]))
        except ValueError as exc:
            raise ValueError(f"Preset entry {idx} ({name}): {exc}") from exc

        presets[name] = (
            CarBuilder()
            .set_seats(seats)
            .set_engine(engine)
            .set_gps(entry.get("gps", False))
            .set_trip_computer(entry.get("trip_computer", False))
            .build()
        )

    logger.debug("Loaded %d car presets from %s", len(presets), presets_path)
    return presets
