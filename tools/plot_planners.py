import sys, os
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def _bar(df, column, title, ylabel, out_path):
    pivot = df.pivot_table(index="scenario", columns="planner", values=column, aggfunc="mean")
    ax = pivot.plot(kind="bar", figsize=(7, 4), rot=15)
    ax.set_title(title)
    ax.set_xlabel("Scenario")
    ax.set_ylabel(ylabel)
    plt.tight_layout(); plt.savefig(out_path, bbox_inches="tight"); plt.close()
    print("Saved:", out_path)


def main(p):
    df = pd.read_csv(p)
    out_dir = os.path.dirname(p)

    # Runtime per scenario, one bar per planner
    _bar(df, "time_s", "Average runtime per run", "Time (s)",
         os.path.join(out_dir, "planner_time_bar.png"))

    # Explored cells: how much narrower A* searches than BFS
    _bar(df, "explored", "Cells explored", "Cells",
         os.path.join(out_dir, "planner_explored_bar.png"))

    # Path length should agree between planners (both optimal)
    ok = df[df["success"] == 1]
    if not ok.empty:
        _bar(ok, "path_hops", "Path length (successful runs)", "Steps",
             os.path.join(out_dir, "planner_hops_bar.png"))


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python tools/plot_planners.py <path/to/planner_benchmark.csv>")
        raise SystemExit(1)
    main(sys.argv[1])
