#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_benchmark.py
----------------
Compare planners on a fixed set of deterministic scenarios:
- open      : obstacle-free field, corner to corner
- corridor  : walls everywhere except a single winding corridor
- walled    : goal sealed off by a ring of walls (no path)
- serpentine: rows of walls with alternating gaps

Each (planner, scenario) pair is run `--repeats` times on the same planner
instance (buffers are reused between runs). Writes one CSV row per pair.

Example:
    python -m cli.run_benchmark --repeats 20 --planners bfs,a_star --outdir results/csv
"""

from __future__ import annotations
import argparse
import csv
import logging
import os
import time
from typing import List, Optional, Tuple

from tqdm import tqdm

from grids.maps import parse_map
from grids.occupancy import Cell, OccupancyGrid
from planners import PLANNERS, get_planner

logger = logging.getLogger(__name__)

Scenario = Tuple[str, OccupancyGrid, Cell, Cell]

FIELDNAMES = [
    "planner", "scenario", "width", "height", "success",
    "time_s", "path_hops", "explored", "repeats",
]

CORRIDOR_MAP = """
S.#########
#.#.......#
#.#.#####.#
#...#...#.#
#####.#.#.#
#.....#...#
#.#########
#........G#
"""


def _open_field(size: int) -> Scenario:
    return "open", OccupancyGrid.empty(size, size), (0, 0), (size - 1, size - 1)


def _walled(size: int) -> Scenario:
    grid = OccupancyGrid.empty(size, size)
    gx = gy = size - 2
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if (dx, dy) != (0, 0):
                grid.set_blocked(gx + dx, gy + dy)
    return "walled", grid, (0, 0), (gx, gy)


def _serpentine(size: int) -> Scenario:
    grid = OccupancyGrid.empty(size, size)
    for i, y in enumerate(range(1, size - 1, 2)):
        for x in range(size):
            grid.set_blocked(x, y)
        gap = size - 1 if i % 2 == 0 else 0
        grid.set_blocked(gap, y, False)
    # walls sit on odd rows up to size - 2, so the bottom row is always open
    return "serpentine", grid, (0, 0), (0, size - 1)


def build_scenarios(size: int = 32) -> List[Scenario]:
    grid, start, goal = parse_map(CORRIDOR_MAP)
    return [
        _open_field(size),
        ("corridor", grid, start, goal),
        _walled(size),
        _serpentine(size),
    ]


def run_case(planner_name: str, scenario: Scenario, repeats: int = 1) -> dict:
    name, grid, start, goal = scenario
    planner = get_planner(planner_name)

    t0 = time.perf_counter()
    for _ in range(repeats):
        out = planner.plan(grid, start, goal)
    t1 = time.perf_counter()

    return {
        "planner": planner_name,
        "scenario": name,
        "width": grid.width, "height": grid.height,
        "success": int(out.found),
        "time_s": (t1 - t0) / repeats,
        "path_hops": out.hops,
        "explored": out.explored,
        "repeats": repeats,
    }


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Benchmark grid planners on built-in scenarios.")
    ap.add_argument("--planners", type=str, default="bfs,a_star",
                    help=f"Comma-separated planners: {','.join(sorted(PLANNERS))}")
    ap.add_argument("--size", type=int, default=32, help="Side length of generated scenarios")
    ap.add_argument("--repeats", type=int, default=5, help="Runs per (planner, scenario)")
    ap.add_argument("--outdir", type=str, default="results/csv", help="Output directory for CSV")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    planners_sel = [p.strip().lower() for p in args.planners.split(",") if p.strip()]
    for key in planners_sel:
        if key not in PLANNERS:
            raise ValueError(f"Unknown planner '{key}'")
    if args.size < 4:
        raise ValueError("--size must be at least 4")
    if args.repeats < 1:
        raise ValueError("--repeats must be at least 1")

    scenarios = build_scenarios(args.size)
    cases = [(p, s) for s in scenarios for p in planners_sel]
    rows = [run_case(p, s, repeats=args.repeats)
            for p, s in tqdm(cases, desc="benchmark", unit="case")]

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, "planner_benchmark.csv")
    tmp_csv = out_csv + f".tmp_{os.getpid()}"
    with open(tmp_csv, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        w.writeheader()
        w.writerows(rows)
    os.replace(tmp_csv, out_csv)
    logger.info("Wrote %d rows to %s", len(rows), out_csv)

    print(f"Saved: {out_csv}")
    print(f"{'planner':8} {'scenario':11} {'succ':4} {'time[s]':>9} {'hops':>5} {'explored':>8}")
    for r in rows:
        print(f"{r['planner']:8} {r['scenario']:11} {r['success']:4d} "
              f"{r['time_s']:9.5f} {r['path_hops']:5d} {r['explored']:8d}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
