"""Graph ports - Abstractions for traversal callbacks and path finding.

These protocols define the contracts between the graph container and
the code that drives it: the per-vertex visitor invoked by traversals,
and the solver that computes shortest paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from ..domain.models import PathResult
    from ..graph.labeled_graph import LabeledGraph

P_contra = TypeVar("P_contra", contravariant=True)


class Visitor(Protocol[P_contra]):
    """Callback invoked once per visited vertex.

    Any plain function or lambda taking ``(vertex, payload)`` satisfies
    this protocol. A visitor must not mutate the graph it is traversing.
    """

    def __call__(self, vertex: str, payload: P_contra) -> None:
        """Process a visited vertex.

        Args:
            vertex: Identifier of the visited vertex.
            payload: Data attached to the vertex.
        """
        ...


class PathFinderPort(Protocol):
    """Port for shortest-path computation.

    Implementation: graph/dijkstra.py (DijkstraPathFinder)
    """

    def solve(self, graph: LabeledGraph, start: str, end: str) -> PathResult:
        """Find the cheapest path between two vertices.

        Args:
            graph: The graph to search.
            start: Identifier of the start vertex.
            end: Identifier of the target vertex.

        Returns:
            PathResult with cost and path, or an unreachable result.
        """
        ...
