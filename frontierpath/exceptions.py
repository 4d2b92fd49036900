"""Custom exception types used across :mod:`frontierpath`."""

from __future__ import annotations


class FrontierPathError(Exception):
    """Base class for all package-specific errors."""


class InputError(FrontierPathError, ValueError):
    """Raised for invalid caller input such as foreign vertices."""


class GraphFormatError(InputError):
    """Raised when an edge or a graph file is malformed."""


class NegativeWeightError(GraphFormatError):
    """Raised when an edge would carry a negative weight."""


class ConfigError(FrontierPathError, ValueError):
    """Raised for invalid configuration options."""


class GraphBusyError(FrontierPathError, RuntimeError):
    """Raised when a graph is mutated while a search is reading it."""


__all__ = [
    "FrontierPathError",
    "InputError",
    "GraphFormatError",
    "NegativeWeightError",
    "ConfigError",
    "GraphBusyError",
]
