#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_search.py
-------------
Run one planner on a text map ('#' blocked, '.' free, 'S' start, 'G' goal)
and print the result, optionally with the explored region overlaid.

Example:
    python -m cli.run_search --map maps/corridor.txt --planner a_star --show-explored
    python -m cli.run_search --map maps/open.txt --start 0,0 --goal 4,4 --json

Exit status: 0 path found, 1 no path, 2 invalid request/map,
3 stopped by --max-steps before the search finished.
"""

from __future__ import annotations
import argparse
import json
import logging
from typing import List, Optional, Tuple

from grids.maps import format_grid, load_map
from planners import PLANNERS, InvalidRequestError, RecordingListener, StepStatus, get_planner

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_INVALID = 2
EXIT_BUDGET = 3


def _parse_cell(s: str) -> Tuple[int, int]:
    try:
        x, y = s.split(",")
        return int(x), int(y)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected X,Y but got '{s}'") from e


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run BFS or A* on a text occupancy map.")
    ap.add_argument("--map", type=str, required=True, help="Path to a text map file")
    ap.add_argument("--planner", type=str, default="a_star", choices=sorted(PLANNERS),
                    help="Planner to run")
    ap.add_argument("--start", type=_parse_cell, default=None, help="Start cell X,Y (overrides 'S')")
    ap.add_argument("--goal", type=_parse_cell, default=None, help="Goal cell X,Y (overrides 'G')")
    ap.add_argument("--max-steps", type=int, default=None,
                    help="Give up after this many search steps")
    ap.add_argument("--show-explored", action="store_true", help="Overlay explored cells ('+')")
    ap.add_argument("--json", action="store_true", help="Print the result as JSON")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        grid, start, goal = load_map(args.map)
    except ValueError as e:
        print(f"[ERR] {e}")
        return EXIT_INVALID
    start = args.start or start
    goal = args.goal or goal

    planner = get_planner(args.planner)
    listener = RecordingListener()
    try:
        run = planner.start(grid, start, goal, listener)
    except InvalidRequestError as e:
        print(f"[ERR] {e}")
        return EXIT_INVALID

    status = run.run(max_steps=args.max_steps)
    if status is StepStatus.CONTINUE:
        run.cancel()
        print(f"[STOP] {planner.name}: no result after {run.steps} steps "
              f"({run.explored} cells explored)")
        return EXIT_BUDGET

    result = run.result()
    logger.info("%s finished in %d steps", planner.name, run.steps)

    if args.json:
        out = result.as_dict()
        out["planner"] = planner.name
        out["start"] = start
        out["goal"] = goal
        print(json.dumps(out))
    else:
        explored = listener.explored if args.show_explored else ()
        print(format_grid(grid, start, goal, explored=explored, path=result.path or ()))
        if result.found:
            print(f"[OK] {planner.name}: path of {len(result.path)} cells "
                  f"({result.hops} steps), {result.explored} explored")
        else:
            print(f"[NO PATH] {planner.name}: {result.explored} explored")

    return EXIT_FOUND if result.found else EXIT_NO_PATH


if __name__ == "__main__":
    raise SystemExit(main())
