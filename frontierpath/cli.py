"""Command-line interface for running shortest-path searches."""

from __future__ import annotations

import argparse
import json
import sys
import traceback
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from .engine import EngineConfig, ShortestPathEngine
from .exceptions import ConfigError, FrontierPathError, InputError
from .export import export_tree_graphml, export_tree_json
from .generator import random_graph
from .graph import Graph, Vertex
from .io import read_graph
from .logger import StdLogger

EXAMPLE_CSV = """# u,v,w
A,B,1
A,D,1
B,C,4
D,E,1
E,C,1
"""

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_INTERNAL = 70


def _load_graph(args: argparse.Namespace) -> Graph:
    if args.random:
        return random_graph(args.n, args.m, args.seed, directed=not args.undirected)
    p = Path(args.edges)
    if not p.exists():
        raise InputError(f"edges file not found: {args.edges}")
    return read_graph(args.edges, args.format, directed=not args.undirected)


def _lookup(G: Graph, raw: str) -> Vertex:
    """Find a vertex by its key as typed on the command line."""
    found = G.vertices_with_key(raw)
    if not found and raw.lstrip("-").isdigit():
        found = G.vertices_with_key(int(raw))
    if len(found) != 1:
        raise InputError(f"no unique vertex with key {raw!r}")
    return found[0]


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``frontierpath`` command-line tool."""
    examples = (
        "Examples:\n"
        "  frontierpath --edges graph.csv --source A\n"
        "  frontierpath --edges graph.csv --source A --target C\n"
        "  frontierpath --random --n 100 --m 500 --source 0\n"
        "  frontierpath --edges graph.csv --source A --export-json tree.json\n"
    )
    p = argparse.ArgumentParser(
        prog="frontierpath",
        description="Single-source shortest paths over a binary-heap frontier",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines on stdout")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--edges", type=str, help="Path to edges file")
    src.add_argument("--random", action="store_true", help="Use a random graph")
    src.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edges CSV to stdout and exit",
    )
    p.add_argument(
        "--format",
        choices=["csv", "jsonl", "graphml"],
        default=None,
        help="Edge file format (auto-detected from extension)",
    )
    p.add_argument("--undirected", action="store_true", help="Mirror every edge")
    p.add_argument("--n", type=int, default=10, help="Vertices (random mode)")
    p.add_argument("--m", type=int, default=20, help="Edges (random mode)")
    p.add_argument("--seed", type=int, default=0, help="Seed controlling random graph generation")
    p.add_argument("--source", type=str, default=None, help="Source vertex key")
    p.add_argument("--target", type=str, default=None, help="Target vertex key for route output")
    p.add_argument("--frontier", choices=["heap", "list"], default="heap")
    p.add_argument("--export-json", type=str, default=None, help="Write shortest-path tree as JSON")
    p.add_argument(
        "--export-graphml",
        type=str,
        default=None,
        help="Write shortest-path tree as GraphML",
    )
    p.add_argument("--metrics-out", type=str, default=None, help="Write run metrics to this JSON file")
    p.add_argument("--plot", type=str, default=None, help="Render the graph and route to this image")

    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_CSV)
        return EXIT_OK

    try:
        G = _load_graph(args)
        if args.source is None:
            source = G.vertices[0]
        else:
            source = _lookup(G, args.source)
        target = _lookup(G, args.target) if args.target is not None else None

        stream = sys.stdout if args.log_json else sys.stderr
        level = "info" if args.log_json and args.log_level == "warning" else args.log_level
        logger = StdLogger(level=level, json_fmt=args.log_json, stream=stream)

        if args.verbose and not args.log_json:
            sys.stderr.write(
                f"config: n={len(G)} m={G.edge_count} frontier={args.frontier} "
                f"directed={not args.undirected} source={source.key!r}\n"
            )

        engine = ShortestPathEngine(G, EngineConfig(frontier=args.frontier), logger)
        res = engine.shortest_paths(source)

        out: Dict[str, Any] = {
            "source": str(source.key),
            "frontier": args.frontier,
            "distances": {str(v.key): rec.total for v, rec in res.items()},
            "unreachable": [str(v.key) for v in G if v not in res],
        }
        if target is not None:
            out["target"] = str(target.key)
            rec = res.get(target)
            out["total"] = rec.total if rec is not None else None
            out["route"] = [str(k) for k in rec.keys()] if rec is not None else []

        if args.export_json:
            with open(args.export_json, "w", encoding="utf-8") as fh:
                fh.write(export_tree_json(G, res))
        if args.export_graphml:
            with open(args.export_graphml, "w", encoding="utf-8") as fh:
                fh.write(export_tree_graphml(G, res))
        if args.metrics_out:
            with open(args.metrics_out, "w", encoding="utf-8") as fh:
                json.dump(asdict(engine.metrics(res)), fh)
        if args.plot:
            import matplotlib.pyplot as plt

            from .visualize import draw_route

            plt.close(draw_route(G, res, target, args.plot))

        if not args.log_json:
            print(json.dumps(out))
        return EXIT_OK

    except (InputError, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_USAGE
    except FrontierPathError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL
    except Exception as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL


if __name__ == "__main__":
    sys.exit(main())
