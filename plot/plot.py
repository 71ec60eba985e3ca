import argparse
import re
from pathlib import Path

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from state.persistence import load_results


def _parse_run_key(key: str):
    m = re.fullmatch(r"(\d+)\s*x\s*(\d+)", key.strip())
    if not m:
        return None
    return int(m.group(1)), int(m.group(2))


def _annotate_points(ax, xs, ys, *, fmt="{:.2f}", dx=0, dy=6, fontsize=8):
        """
        Annotate points (x, y) on ax with formatted y values.

        Args:
            ax: matplotlib Axes
            xs: list of x coordinates
            ys: list of y coordinates
            fmt: format string for y values
            dx: x offset in points
            dy: y offset in points
            fontsize: font size for annotations
        """

        for x, y in zip(xs, ys):
            if y is None or np.isnan(y):
                continue
            ax.annotate(
                fmt.format(y),
                (x, y),
                textcoords="offset points",
                xytext=(dx, dy),
                ha="center",
                va="center",
                fontsize=fontsize,
            )


def compute_run_stats(games: dict):
    """
    Returns a dict with
      avg/min/max_turns (float, np.nan if no won games), won games only
      avg/min/max_total_time (float, np.nan if no won games), won games only
      avg_turn_times (list[float]) average time per turn index (turn 1 at index 0), won games only
      turn_histogram (dict[int, int]) number of won games per turn count
      n_won, n_games (int)
    """
    won = np.array(games.get("won", []), dtype=bool)
    turns = np.array(games.get("turns", []), dtype=np.int32)
    total_time = np.array(games.get("total_time_s", []), dtype=np.float32)

    # Guard against length mismatches
    n = min(len(won), len(turns), len(total_time))
    won = won[:n]
    turns = turns[:n]
    total_time = total_time[:n]

    won_turns = turns[won]
    won_total_times = total_time[won]
    n_won = int(won_turns.size)

    def _stat(fn, values):
        return float(fn(values)) if values.size > 0 else np.nan

    # avg time per turn index (won games only)
    turn_cols = [
        t for t, w in zip(games.get("turn_time_s", [])[:n], won) if w
    ]
    max_turns = max((len(t) for t in turn_cols), default=0)
    avg_turn_times = []
    for i in range(max_turns):
        vals = [t[i] for t in turn_cols if i < len(t)]
        avg_turn_times.append(float(np.mean(vals)) if vals else np.nan)

    values, counts = np.unique(won_turns, return_counts=True)

    return {
        "avg_turns": _stat(np.mean, won_turns),
        "min_turns": _stat(np.min, won_turns),
        "max_turns": _stat(np.max, won_turns),
        "avg_total_time": _stat(np.mean, won_total_times),
        "min_total_time": _stat(np.min, won_total_times),
        "max_total_time": _stat(np.max, won_total_times),
        "avg_turn_times": avg_turn_times,
        "turn_histogram": {int(v): int(c) for v, c in zip(values, counts)},
        "n_won": n_won,
        "n_games": n,
    }


def plot_run(key, run, outdir: Path):
    """
    Draw the charts for one '<pegs>x<colors>' run.

    Returns:
        list[Path]: The PNG files written.
    """
    strategies = [s for s in run if run[s].get("games")]
    stats = {s: compute_run_stats(run[s]["games"]) for s in strategies}
    written = []

    # Plot configuration:
    plt.rcParams["lines.solid_capstyle"] = "round"
    plt.rcParams["lines.solid_joinstyle"] = "round"
    plt.rcParams["lines.linewidth"] = 1.0

    # Plot 1: Average turns per strategy with min/max range
    fig, ax = plt.subplots(figsize=(10, 6))
    x = np.arange(len(strategies))
    avg = [stats[s]["avg_turns"] for s in strategies]
    lo = [stats[s]["min_turns"] for s in strategies]
    hi = [stats[s]["max_turns"] for s in strategies]
    ax.bar(x, avg, alpha=0.6, label="Average Turns")
    ax.scatter(x, hi, marker="^", s=20, label="Max Turns")
    ax.scatter(x, lo, marker="v", s=20, label="Min Turns")
    _annotate_points(ax, x, avg, fmt="{:.2f}", dy=8)
    ax.set_xticks(x)
    ax.set_xticklabels(strategies)
    ax.set_title(
        f"Turns per Game for {key}\n Games won: "
        + ", ".join(f"{s}: {stats[s]['n_won']}/{stats[s]['n_games']}" for s in strategies)
    )
    ax.set_ylabel("Turns [won games]")
    ax.grid(True, axis="y")
    ax.legend()
    out = outdir / f"{key}_avg_turns.png"
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    written.append(out)

    # Plot 2: Distribution of turns per strategy
    fig, ax = plt.subplots(figsize=(10, 6))
    all_turns = sorted({t for s in strategies for t in stats[s]["turn_histogram"]})
    width = 0.8 / max(1, len(strategies))
    for i, s in enumerate(strategies):
        hist = stats[s]["turn_histogram"]
        xs = np.array(all_turns, dtype=float) + (i - (len(strategies) - 1) / 2) * width
        ax.bar(xs, [hist.get(t, 0) for t in all_turns], width=width, label=s)
    ax.set_xticks(all_turns)
    ax.set_title(f"Turn Distribution for {key}")
    ax.set_xlabel("Turns needed")
    ax.set_ylabel("Games won")
    ax.grid(True, axis="y")
    ax.legend(title="Strategy")
    out = outdir / f"{key}_turn_distribution.png"
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    written.append(out)

    # Plot 3: Average turn time vs turn number
    max_turns = max((len(stats[s]["avg_turn_times"]) for s in strategies), default=0)
    if max_turns == 0:
        print(f"[info] No turn-time data to plot for {key}.")
        return written
    fig, ax = plt.subplots(figsize=(12, 8))
    for s in strategies:
        y = stats[s]["avg_turn_times"]
        if not y:
            continue
        xs = np.arange(1, len(y) + 1)
        ax.plot(xs, y, marker="o", label=s)
        _annotate_points(ax, xs, y, fmt="{:.3f}s", dy=8)
    ax.set_title(f"Average Turn Time for {key}")
    ax.set_xlabel("Turn Number")
    ax.set_ylabel("Average Turn Time (s) [won games]")
    ax.set_xticks(np.arange(1, max_turns + 1))
    ax.set_yscale("log")
    ax.grid(True)
    ax.legend(title="Strategy")
    out = outdir / f"{key}_avg_turn_time.png"
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    written.append(out)
    return written


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--file", default="benchmark.json", help="Path to benchmark JSON")
    ap.add_argument("--pegs", nargs="*", type=int, default=None,
                    help="Which peg counts to plot (e.g. --pegs 4 5). Default: all found.")
    ap.add_argument("--outdir", default="./results", help="Output directory for PNGs")
    args = ap.parse_args(argv)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    runs = load_results(args.file).get("runs", {})

    found = False
    for key, run in sorted(runs.items()):
        parsed = _parse_run_key(key)
        if parsed is None:
            continue
        found = True
        if args.pegs is not None and parsed[0] not in args.pegs:
            print(f"[skip] {key} not selected.")
            continue
        for out in plot_run(key, run, outdir):
            print(f"Wrote {out}")

    if not found:
        raise ValueError("No runs found with keys like '4x6' in data['runs'].")


if __name__ == "__main__":
    main()
