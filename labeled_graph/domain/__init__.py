"""Domain layer - Core models and errors.

This module contains the per-vertex record, the shortest-path result
and the typed errors used throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DuplicateVertexError,
    LabeledGraphError,
    UnknownVertexError,
)
from .models import UNREACHABLE, PathResult, Vertex

__all__ = [
    # Models
    "Vertex",
    "PathResult",
    "UNREACHABLE",
    # Errors
    "LabeledGraphError",
    "DuplicateVertexError",
    "UnknownVertexError",
    "ConfigurationError",
]
