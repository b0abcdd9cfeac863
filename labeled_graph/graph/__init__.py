"""Graph container and algorithms.

This subpackage contains the labeled graph container and the
traversal and path-finding algorithms that run on top of it.
"""

from .dijkstra import DijkstraPathFinder, dijkstra
from .labeled_graph import NO_EDGE, LabeledGraph
from .traversal import breadth_first, depth_first

__all__ = [
    "LabeledGraph",
    "NO_EDGE",
    "depth_first",
    "breadth_first",
    "dijkstra",
    "DijkstraPathFinder",
]
