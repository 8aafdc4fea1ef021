#!/usr/bin/env python3
import importlib, sys, traceback
from pathlib import Path

# --- Ensure the repo root is on sys.path ---
ROOT = Path(__file__).resolve().parent.parent  # repo root = parent of scripts/
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

OK = "\x1b[92mOK\x1b[0m"
BAD = "\x1b[91mERR\x1b[0m"

def check(name, fn):
    try:
        fn()
        print(f"[{OK}] {name}")
    except Exception as e:
        print(f"[{BAD}] {name}: {e}")
        traceback.print_exc()
        sys.exit(1)

def test_grids():
    maps = importlib.import_module("grids.maps")
    grid, start, goal = maps.parse_map("S..\n.#.\n..G")
    assert (grid.width, grid.height) == (3, 3)
    assert start == (0, 0) and goal == (2, 2)

def test_planners():
    planners = importlib.import_module("planners")
    from grids.occupancy import OccupancyGrid
    grid = OccupancyGrid.empty(20, 20)
    for name in planners.PLANNERS:
        res = planners.get_planner(name).plan(grid, (0, 0), (19, 19))
        assert res.found and res.hops == 38, f"{name}: {res}"

def test_cli_help():
    import subprocess
    for mod in ["cli.run_search", "cli.run_benchmark"]:
        r = subprocess.run([sys.executable, "-m", mod, "--help"], cwd=str(ROOT),
                           stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
        assert r.returncode == 0, f"{mod} --help failed"

if __name__ == "__main__":
    check("grids", test_grids)
    check("planners", test_planners)
    check("CLIs --help", test_cli_help)
    print(f"[{OK}] All self-checks passed.")
