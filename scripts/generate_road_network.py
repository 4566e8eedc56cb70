#!/usr/bin/env python3
"""
Generate a procedural road network with roadside trees, a terrain patch, and optional
building and passenger plans, and export it as:

  - roads.json
  - trees.json
  - terrain.json
  - buildings.json
  - passengers.json
  - progen_world.json

Optionally renders a top-down PNG preview.
"""

from __future__ import annotations

import argparse
import shutil
from pathlib import Path


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a procedural road network.")
    parser.add_argument("--config", type=str, default=None, help="User YAML config merged over the defaults.")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for deterministic generation.")
    parser.add_argument("--num-segments", type=int, default=None, help="Maximum number of road segments.")
    parser.add_argument(
        "--strategy",
        choices=["grid", "connection"],
        default=None,
        help="Road generation strategy (default: citygen.road.strategy).",
    )
    parser.add_argument("--output-dir", type=Path, default=None, help="Export directory (default: citygen.output_dir).")
    parser.add_argument("--buildings", action="store_true", help="Also plan buildings along the roads.")
    parser.add_argument("--passengers", action="store_true", help="Also plan passengers at open intersections.")
    parser.add_argument("--render", type=Path, default=None, help="Write a top-down PNG preview to this path.")
    parser.add_argument("--overwrite", action="store_true", help="Overwrite the output directory if it exists.")
    args = parser.parse_args()

    from roadgrid.citygen.function_call import CityFunctionCall
    from roadgrid.config import Config
    from roadgrid.utils.logger import Logger

    config = Config(args.config)
    Logger.configure_from(config)

    out_dir = args.output_dir or Path(config["citygen.output_dir"])
    if out_dir.exists():
        if not args.overwrite:
            raise FileExistsError(f"Target already exists: {out_dir}. Pass --overwrite to replace it.")
        shutil.rmtree(out_dir)

    cfc = CityFunctionCall(
        config,
        seed=args.seed,
        num_segments=args.num_segments,
        strategy=args.strategy,
        generate_building=True if args.buildings else None,
        generate_passenger=True if args.passengers else None,
    )
    network = cfc.generate_city()
    cfc.export_city(str(out_dir))
    if args.render is not None:
        cfc.render_city(str(args.render))

    print(f"Generated {network.stats.placed} road segments: {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
