#!/usr/bin/env python
"""Print a table of the configured car presets.

Loads ``data/car_presets.yaml`` (or the file given as the first argument),
builds every preset and prints one row per car followed by the total
seating capacity.

Usage
-----
::

    python scripts/fleet_summary.py [path/to/presets.yaml]

Requirements
------------
- ``pandas>=2.0.0`` and ``pyyaml>=6.0`` must be installed.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

# Ensure the project root is on the import path when running as a script.
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from car_builder.config import load_presets  # noqa: E402
from car_builder.fleet import fleet_frame  # noqa: E402


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0]) if args else None

    presets = load_presets(path)
    frame = fleet_frame(presets)

    print("=" * 60)
    print("CAR PRESETS")
    print("=" * 60)
    print(frame.to_string())
    print("-" * 60)
    print(f"{len(frame)} cars, {int(frame['seats'].sum())} seats in total.")


if __name__ == "__main__":
    sys.exit(main() or 0)
