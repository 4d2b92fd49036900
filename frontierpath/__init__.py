"""Public package exports for :mod:`frontierpath`."""

from __future__ import annotations

from .dijkstra import dijkstra_reference
from .engine import (
    EngineConfig,
    SearchMetrics,
    ShortestPathEngine,
    ShortestPaths,
    shortest_path,
    shortest_paths,
)
from .exceptions import (
    ConfigError,
    FrontierPathError,
    GraphBusyError,
    GraphFormatError,
    InputError,
    NegativeWeightError,
)
from .frontier import HeapFrontier, ListFrontier
from .graph import Edge, Graph, Vertex
from .heap import BinaryHeap
from .io import read_graph, write_graph
from .logger import Logger, NoopLogger, StdLogger
from .path import Path, PathArena, PathRecord

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "Vertex",
    "Edge",
    "BinaryHeap",
    "HeapFrontier",
    "ListFrontier",
    "Path",
    "PathArena",
    "PathRecord",
    "ShortestPathEngine",
    "ShortestPaths",
    "EngineConfig",
    "SearchMetrics",
    "shortest_paths",
    "shortest_path",
    "dijkstra_reference",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "read_graph",
    "write_graph",
    "FrontierPathError",
    "InputError",
    "GraphFormatError",
    "NegativeWeightError",
    "ConfigError",
    "GraphBusyError",
]
