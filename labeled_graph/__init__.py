"""Top-level package for the labeled graph library.

A generic directed weighted graph keyed by string identifiers, with
per-vertex payloads, adjacency queries, depth-first and breadth-first
traversal driven by a visitor callback, and Dijkstra shortest paths.
"""

from .config import AppConfig, GraphConfig, get_config, reset_config
from .domain import (
    UNREACHABLE,
    ConfigurationError,
    DuplicateVertexError,
    LabeledGraphError,
    PathResult,
    UnknownVertexError,
)
from .graph import NO_EDGE, DijkstraPathFinder, LabeledGraph
from .logging_config import configure_logging

__all__ = [
    "LabeledGraph",
    "NO_EDGE",
    "PathResult",
    "UNREACHABLE",
    "DijkstraPathFinder",
    "LabeledGraphError",
    "DuplicateVertexError",
    "UnknownVertexError",
    "ConfigurationError",
    "AppConfig",
    "GraphConfig",
    "get_config",
    "reset_config",
    "configure_logging",
]
