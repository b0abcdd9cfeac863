"""Shortest-path computation using Dijkstra's algorithm.

The heap holds ``(distance, vertex)`` pairs and is seeded with every
vertex. Entries superseded by a shorter distance stay in the heap and
are skipped when popped; popping an infinite distance ends the search,
since every vertex left is unreachable.

Ties between equal distances are settled in lexicographic order of the
vertex identifiers, and a predecessor is only replaced by a strictly
shorter distance. Each vertex is settled at most once, so the search
terminates even when a caller supplies negative weights, although the
result is then unspecified.
"""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Set, Tuple

from ..domain.errors import UnknownVertexError
from ..domain.models import UNREACHABLE, PathResult

if TYPE_CHECKING:
    from .labeled_graph import LabeledGraph

logger = logging.getLogger(__name__)


def dijkstra(graph: LabeledGraph[Any], start: str, end: str) -> PathResult:
    """Compute the cheapest path between two vertices.

    Parameters
    ----------
    graph:
        Graph to search.
    start:
        Identifier of the start vertex.
    end:
        Identifier of the target vertex.

    Returns
    -------
    PathResult
        The total cost and the vertices from ``start`` to ``end``
        (inclusive). If no path exists, returns ``UNREACHABLE``
        (``cost`` is None and the path is empty).

    Raises
    ------
    UnknownVertexError
        If either endpoint is not in the graph.
    """
    for vertex in (start, end):
        if vertex not in graph:
            raise UnknownVertexError(
                f"Vertex is not part of the graph: {vertex}",
                vertex=vertex,
            )

    distances: Dict[str, float] = {}
    previous: Dict[str, str] = {}
    heap: List[Tuple[float, str]] = []

    for vertex in graph.get_vertices():
        distances[vertex] = 0 if vertex == start else math.inf
        heap.append((distances[vertex], vertex))
    heapq.heapify(heap)

    settled: Set[str] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if math.isinf(current_distance):
            break
        if u in settled or current_distance > distances[u]:
            continue

        settled.add(u)

        for v, weight in graph.get_adjacent_vertices(u).items():
            if v in settled:
                continue
            new_distance = current_distance + weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    if math.isinf(distances[end]):
        logger.info("No path found", extra={"start": start, "end": end})
        return UNREACHABLE

    path: List[str] = [end]
    current = end
    while current != start:
        current = previous[current]
        path.append(current)
    path.reverse()

    cost = int(distances[end])
    logger.debug(
        "Shortest path found",
        extra={"start": start, "end": end, "cost": cost, "hops": len(path) - 1},
    )
    return PathResult(cost=cost, path=tuple(path))


@dataclass
class DijkstraPathFinder:
    """Path finder using Dijkstra's shortest path algorithm.

    This class implements PathFinderPort and is the default
    ``LabeledGraph.path_finder``; pass another solver to the graph
    constructor to replace it.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: LabeledGraph[Any], start: str, end: str) -> PathResult:
        """Find the shortest path between two vertices.

        Args:
            graph: The graph to search.
            start: Identifier of the start vertex.
            end: Identifier of the target vertex.

        Returns:
            PathResult with cost and path, or ``UNREACHABLE``.

        Raises:
            UnknownVertexError: If either endpoint is not in the graph.
        """
        self._logger.debug("Solving path", extra={"start": start, "end": end})
        return dijkstra(graph, start, end)
