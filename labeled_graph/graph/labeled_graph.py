"""Labeled directed graph container.

This module defines ``LabeledGraph``, a mutable directed weighted graph
keyed by string identifiers. Each vertex carries an arbitrary payload
and a mapping of outgoing edges to integer weights. Traversals and
shortest-path queries are delegated to ``traversal`` and to an
injectable path finder (``DijkstraPathFinder`` by default).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, Iterator, List, TypeVar

from ..config import GraphConfig, get_config
from ..domain.errors import DuplicateVertexError, UnknownVertexError
from ..domain.models import PathResult, Vertex
from ..ports.graph import PathFinderPort, Visitor
from .dijkstra import DijkstraPathFinder
from .traversal import breadth_first, depth_first

P = TypeVar("P")

# Returned by get_cost when the directed edge does not exist.
NO_EDGE = -1


@dataclass
class LabeledGraph(Generic[P]):
    """Directed weighted graph with per-vertex payloads.

    Usage:
        graph = LabeledGraph[str]()
        graph.add_vertex("A", "start")
        graph.add_vertex("B", "end")
        graph.add_directed_edge("A", "B", 3)
        cost, path = graph.shortest_path("A", "B")

    The graph is not thread-safe, and a traversal callback must not
    mutate the graph it is traversing.

    Attributes:
        config: Graph configuration (neighbor expansion order)
        path_finder: Shortest-path solver used by ``shortest_path``
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)

    path_finder: PathFinderPort = field(
        default_factory=DijkstraPathFinder, repr=False, compare=False
    )

    _vertices: Dict[str, Vertex[P]] = field(default_factory=dict, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # -- mutation ---------------------------------------------------------

    def add_vertex(self, vertex: str, payload: P) -> None:
        """Add a vertex with its payload and no outgoing edges.

        Raises:
            DuplicateVertexError: If the vertex is already in the graph.
        """
        if vertex in self._vertices:
            raise DuplicateVertexError(
                f"Vertex already exists in the graph: {vertex}",
                vertex=vertex,
            )
        self._vertices[vertex] = Vertex(payload=payload)
        self._logger.debug("Vertex added", extra={"vertex": vertex})

    def add_directed_edge(self, start: str, end: str, weight: int) -> None:
        """Add the edge ``start -> end``, overwriting any previous weight.

        Negative weights are accepted; shortest paths over them are
        unspecified.

        Raises:
            UnknownVertexError: If either endpoint is not in the graph.
        """
        self._require(start, end)
        edges = self._vertices[start].edges
        if end in edges:
            self._logger.debug(
                "Edge weight overwritten",
                extra={"start": start, "end": end, "old": edges[end], "new": weight},
            )
        if weight < 0:
            self._logger.debug(
                "Negative edge weight accepted",
                extra={"start": start, "end": end, "weight": weight},
            )
        edges[end] = weight

    # -- queries ----------------------------------------------------------

    def get_vertices(self) -> List[str]:
        """Return all vertex identifiers in lexicographic order."""
        return sorted(self._vertices)

    def get_adjacent_vertices(self, vertex: str) -> Dict[str, int]:
        """Return a copy of the outgoing edges of ``vertex``.

        Raises:
            UnknownVertexError: If the vertex is not in the graph.
        """
        self._require(vertex)
        return dict(self._vertices[vertex].edges)

    def get_cost(self, start: str, end: str) -> int:
        """Return the weight of ``start -> end``, or ``NO_EDGE`` if absent.

        Raises:
            UnknownVertexError: If either endpoint is not in the graph.
        """
        self._require(start, end)
        return self._vertices[start].edges.get(end, NO_EDGE)

    def get_data(self, vertex: str) -> P:
        """Return the payload attached to ``vertex``.

        Raises:
            UnknownVertexError: If the vertex is not in the graph.
        """
        self._require(vertex)
        return self._vertices[vertex].payload

    @property
    def edge_count(self) -> int:
        """Return the number of directed edges."""
        return sum(len(record.edges) for record in self._vertices.values())

    def neighbors(self, vertex: str) -> List[str]:
        """Return outgoing neighbors in the configured expansion order.

        Raises:
            UnknownVertexError: If the vertex is not in the graph.
        """
        self._require(vertex)
        edges = self._vertices[vertex].edges
        if self.config.neighbor_order == "sorted":
            return sorted(edges)
        return list(edges)

    # -- algorithms -------------------------------------------------------

    def depth_first_search(self, start: str, visit: Visitor[P]) -> None:
        """Visit every vertex reachable from ``start``, depth first.

        Raises:
            UnknownVertexError: If the start vertex is not in the graph.
        """
        depth_first(self, start, visit)

    def breadth_first_search(self, start: str, visit: Visitor[P]) -> None:
        """Visit every vertex reachable from ``start``, level by level.

        Raises:
            UnknownVertexError: If the start vertex is not in the graph.
        """
        breadth_first(self, start, visit)

    def shortest_path(self, start: str, end: str) -> PathResult:
        """Compute the cheapest path from ``start`` to ``end``.

        Returns:
            PathResult whose ``cost`` is None when ``end`` is unreachable.

        Raises:
            UnknownVertexError: If either endpoint is not in the graph.
        """
        self._require(start, end)
        return self.path_finder.solve(self, start, end)

    # -- dunder -----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_vertices())

    def __str__(self) -> str:
        vertices = self.get_vertices()
        lines = [f"Vertices: {vertices}", "Edges:"]
        for vertex in vertices:
            edges = self._vertices[vertex].edges
            adjacency = {neighbor: edges[neighbor] for neighbor in sorted(edges)}
            lines.append(f"Vertex({vertex})--->{adjacency}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"LabeledGraph(vertices={len(self)}, edges={self.edge_count})"

    def _require(self, *vertices: str) -> None:
        for vertex in vertices:
            if vertex not in self._vertices:
                raise UnknownVertexError(
                    f"Vertex is not part of the graph: {vertex}",
                    vertex=vertex,
                )
