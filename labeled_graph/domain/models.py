"""Domain models for the labeled graph container.

These models have no external dependencies. ``Vertex`` is the single
per-vertex record owned by a graph; ``PathResult`` is the immutable
outcome of a shortest-path query.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, Iterator, Optional, TypeVar

P = TypeVar("P")


@dataclass(slots=True)
class Vertex(Generic[P]):
    """A vertex payload together with its outgoing edges.

    Attributes:
        payload: Caller-supplied data attached at creation time
        edges: Neighbor identifier -> edge weight, in edge insertion order
    """

    payload: P
    edges: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path computation between two vertices.

    Attributes:
        cost: Total weight of the path, or None when the target is unreachable
        path: Ordered vertex identifiers from start to end (inclusive)
    """

    cost: Optional[int]
    path: tuple[str, ...] = field(default_factory=tuple)

    @property
    def reachable(self) -> bool:
        """Check if a path to the target exists."""
        return self.cost is not None

    @property
    def is_empty(self) -> bool:
        """Check if no path was found."""
        return len(self.path) == 0

    @property
    def num_hops(self) -> int:
        """Return the number of edges along the path."""
        return max(len(self.path) - 1, 0)

    def __iter__(self) -> Iterator[object]:
        # Allows ``cost, path = graph.shortest_path(a, b)``.
        return iter((self.cost, self.path))


UNREACHABLE = PathResult(cost=None, path=())
