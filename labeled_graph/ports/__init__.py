"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the graph container and the code
that plugs into it, keeping traversal callbacks and solvers swappable.
"""

from .graph import PathFinderPort, Visitor

__all__ = [
    "Visitor",
    "PathFinderPort",
]
