"""
Module: hull_benchmark
Description: Empirically evaluate Chan's convex hull algorithm.
             - Generate random 2D point sets (uniform square: few hull vertices;
               circle: every point on the hull).
             - Measure runtime of chans_algorithm (median of several runs).
             - Compare against theoretical O(n log h) growth (normalized n log h curve).
"""

import argparse
import logging
import math
import time
from statistics import median
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd

from chans_hull import Point, chans_algorithm

logger = logging.getLogger(__name__)

DEFAULT_SIZES = [1000, 2000, 4000, 8000, 16000]
DEFAULT_REPEATS = 3
SHAPES = ("square", "circle")


# ---------- Point generators ----------
def random_points(n: int, seed: int = 0, scale: float = 100.0) -> List[Point]:
    """n points uniform in [0, scale)^2; expected hull size grows like log n."""
    rng = np.random.default_rng(seed)
    return [tuple(p) for p in (rng.random((n, 2)) * scale).tolist()]


def circle_points(n: int, seed: int = 0, radius: float = 100.0) -> List[Point]:
    """n points on a circle at random angles, shuffled; every point is a hull vertex."""
    rng = np.random.default_rng(seed)
    angles = rng.permutation(np.linspace(0.0, 2 * np.pi, n, endpoint=False))
    xs = radius * np.cos(angles)
    ys = radius * np.sin(angles)
    return list(zip(xs.tolist(), ys.tolist()))


def make_points(shape: str, n: int, seed: int = 0) -> List[Point]:
    if shape == "square":
        return random_points(n, seed)
    if shape == "circle":
        return circle_points(n, seed)
    raise ValueError(f"unknown shape {shape!r}, expected one of {SHAPES}")


# ---------- Timing ----------
def time_hull(points: Sequence[Point], repeats: int = DEFAULT_REPEATS) -> Tuple[float, int]:
    """Median wall time over `repeats` runs, and the hull size."""
    if repeats < 1:
        raise ValueError("repeats must be at least 1")
    times = []
    hull: List[Point] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        hull = chans_algorithm(points)
        times.append(time.perf_counter() - t0)
    return median(times), len(hull)


def run_experiment(sizes: Sequence[int] = DEFAULT_SIZES, shape: str = "square",
                   repeats: int = DEFAULT_REPEATS, seed: int = 0) -> pd.DataFrame:
    """
    One row per n: measured seconds, hull size h, n log2 h, and the n log h
    curve scaled so its last point equals the last measurement.
    ratio = seconds / theory stays near 1 when growth matches O(n log h).
    """
    rows = []
    for i, n in enumerate(sizes):
        pts = make_points(shape, n, seed + i)
        seconds, h = time_hull(pts, repeats)
        logger.info("n=%d shape=%s h=%d: %.6fs", n, shape, h, seconds)
        rows.append({"n": n, "h": h, "seconds": seconds,
                     "n_log_h": n * math.log2(max(h, 2))})
    df = pd.DataFrame(rows, columns=["n", "h", "seconds", "n_log_h"])
    if df.empty:
        df["theory"] = pd.Series(dtype=float)
        df["ratio"] = pd.Series(dtype=float)
        return df
    scale = df["seconds"].iloc[-1] / df["n_log_h"].iloc[-1]
    df["theory"] = df["n_log_h"] * scale
    df["ratio"] = df["seconds"] / df["theory"]
    return df


# ---------- CLI ----------
def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Time Chan's algorithm against O(n log h).")
    ap.add_argument("--sizes", nargs="+", type=int, default=DEFAULT_SIZES)
    ap.add_argument("--repeats", type=int, default=DEFAULT_REPEATS,
                    help="Runs per size; the median is reported.")
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--shape", choices=SHAPES, default="square")
    ap.add_argument("--verbose", action="store_true", help="Log each measurement.")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    if args.repeats < 1:
        ap.error("--repeats must be at least 1")

    df = run_experiment(args.sizes, args.shape, args.repeats, args.seed)
    print(df.to_string(index=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
