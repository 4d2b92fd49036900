"""Micro-benchmark utilities for the engine.

Run this module as a script to time the heap frontier against the
linear-scan list frontier and the :mod:`heapq` reference on random graphs.

Example:
```bash
python -m frontierpath.bench --trials 5 --sizes 1000,5000 2000,10000 --out-csv out.csv
```
"""

from __future__ import annotations

import argparse
import csv
import statistics
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from .dijkstra import dijkstra_reference
from .engine import EngineConfig, SearchMetrics, ShortestPathEngine
from .generator import random_graph


@dataclass
class BenchResult:
    """Result of a single benchmarking run."""

    metrics: SearchMetrics
    reference_ms: float
    max_abs_err: float


def run_once(n: int, m: int, frontier: str, seed: int = 0) -> BenchResult:
    """Run the engine once and compare against the reference.

    Args:
        n: Number of vertices.
        m: Number of edges.
        frontier: Frontier name (``"heap"`` or ``"list"``).
        seed: Seed for the random graph generator.

    Returns:
        Timing information and maximum absolute distance error.
    """
    G = random_graph(n, m, seed, weight_dist="float", w_max=10)
    s = G.vertices[0]

    engine = ShortestPathEngine(G, EngineConfig(frontier=frontier))
    res = engine.shortest_paths(s)

    t0 = time.perf_counter()
    ref, _ = dijkstra_reference(G, s)
    reference_ms = (time.perf_counter() - t0) * 1000.0

    if set(ref) != set(res):
        max_err = float("inf")
    else:
        max_err = max((abs(res[v].total - d) for v, d in ref.items()), default=0.0)
    return BenchResult(
        metrics=engine.metrics(res),
        reference_ms=reference_ms,
        max_abs_err=max_err,
    )


def _p95(values: List[float]) -> float:
    if len(values) < 2:
        return values[0]
    return statistics.quantiles(values, n=100, method="inclusive")[94]


def main(argv: List[str] | None = None) -> None:
    """Run benchmarking trials and optionally record results.

    Args:
        argv: Optional argument list for testing.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--trials", type=int, default=1, help="Number of trials per configuration")
    parser.add_argument(
        "--sizes",
        nargs="+",
        default=["100,400", "400,1600"],
        help="Size pairs as n,m (e.g. 1000,5000). Defaults to a small demo.",
    )
    parser.add_argument("--seed-base", type=int, default=0, help="Base seed for random graphs")
    parser.add_argument("--out-csv", type=Path, help="Optional path to write per-trial CSV data")
    args = parser.parse_args(argv)

    sizes: List[Tuple[int, int]] = []
    for spec in args.sizes:
        try:
            n_str, m_str = spec.split(",")
            sizes.append((int(n_str), int(m_str)))
        except ValueError:
            parser.error(f"invalid size specification '{spec}'")

    rows: List[List[object]] = []
    timings: Dict[Tuple[int, int, str], Tuple[List[float], List[float], List[int]]] = {}

    for n, m in sizes:
        for frontier in ("heap", "list"):
            e_times: List[float] = []
            r_times: List[float] = []
            stale: List[int] = []
            for trial in range(args.trials):
                res = run_once(n, m, frontier, seed=args.seed_base + trial)
                mtx = res.metrics
                rows.append(
                    [
                        mtx.n,
                        mtx.m,
                        mtx.frontier,
                        trial,
                        f"{mtx.wall_ms:.6f}",
                        f"{res.reference_ms:.6f}",
                        mtx.counters["pushes"],
                        mtx.counters["stale_pops"],
                        mtx.counters["max_frontier"],
                        f"{res.max_abs_err:.3g}",
                    ]
                )
                e_times.append(mtx.wall_ms)
                r_times.append(res.reference_ms)
                stale.append(mtx.counters["stale_pops"])
            timings[(n, m, frontier)] = (e_times, r_times, stale)

    if args.out_csv:
        with args.out_csv.open("w", newline="") as fh:
            writer = csv.writer(fh)
            writer.writerow(
                [
                    "n",
                    "m",
                    "frontier",
                    "trial",
                    "engine_ms",
                    "reference_ms",
                    "pushes",
                    "stale_pops",
                    "max_frontier",
                    "max_abs_err",
                ]
            )
            writer.writerows(rows)

    print(
        f"{'n':>6} {'m':>7} {'frontier':>8} {'stale':>8}"
        f" {'eng_med':>10} {'eng_p95':>10} {'ref_med':>10} {'ref_p95':>10}"
    )
    for (n, m, frontier), (e_times, r_times, stale) in timings.items():
        print(
            f"{n:6d} {m:7d} {frontier:>8} {int(statistics.median(stale)):8d}"
            f" {statistics.median(e_times):10.2f} {_p95(e_times):10.2f}"
            f" {statistics.median(r_times):10.2f} {_p95(r_times):10.2f}"
        )


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
