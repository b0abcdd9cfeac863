"""Depth-first and breadth-first traversal.

Both traversals push every outgoing neighbor, visited or not, and skip
vertices that were already visited when they come off the stack or
queue. Each reachable vertex is therefore visited exactly once and
unreachable vertices are never reported.

Neighbors are expanded in the graph's configured order (see
``GraphConfig.neighbor_order``), which makes the visitation order
deterministic for a given graph.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any, Deque, List, Set

from ..domain.errors import UnknownVertexError

if TYPE_CHECKING:
    from ..ports.graph import Visitor
    from .labeled_graph import LabeledGraph

logger = logging.getLogger(__name__)


def _check_start(graph: LabeledGraph[Any], start: str) -> None:
    if start not in graph:
        raise UnknownVertexError(
            f"Start vertex is not part of the graph: {start}",
            vertex=start,
        )


def depth_first(graph: LabeledGraph[Any], start: str, visit: Visitor[Any]) -> None:
    """Iterative depth-first search from ``start``.

    Neighbors are pushed in reverse expansion order, so the first
    neighbor in expansion order is the first one explored.

    Args:
        graph: The graph to traverse.
        start: Identifier of the start vertex.
        visit: Callback invoked with ``(vertex, payload)`` once per vertex.

    Raises:
        UnknownVertexError: If ``start`` is not in the graph.
    """
    _check_start(graph, start)

    stack: List[str] = [start]
    visited: Set[str] = set()

    while stack:
        vertex = stack.pop()
        if vertex in visited:
            continue

        visit(vertex, graph.get_data(vertex))
        visited.add(vertex)
        stack.extend(reversed(graph.neighbors(vertex)))

    logger.debug(
        "Depth-first search finished",
        extra={"start": start, "visited": len(visited)},
    )


def breadth_first(graph: LabeledGraph[Any], start: str, visit: Visitor[Any]) -> None:
    """Queue-based breadth-first search from ``start``.

    Args:
        graph: The graph to traverse.
        start: Identifier of the start vertex.
        visit: Callback invoked with ``(vertex, payload)`` once per vertex.

    Raises:
        UnknownVertexError: If ``start`` is not in the graph.
    """
    _check_start(graph, start)

    queue: Deque[str] = deque([start])
    visited: Set[str] = set()

    while queue:
        vertex = queue.popleft()
        if vertex in visited:
            continue

        visited.add(vertex)
        visit(vertex, graph.get_data(vertex))
        queue.extend(graph.neighbors(vertex))

    logger.debug(
        "Breadth-first search finished",
        extra={"start": start, "visited": len(visited)},
    )
