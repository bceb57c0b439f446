"""Graph container and shortest-path engine.

This subpackage holds the in-memory town graph and the Dijkstra search
that runs on top of it.
"""

from .dijkstra import INFINITY, SearchContext, compute_shortest_paths, reconstruct_path
from .graph import Graph

__all__ = [
    "Graph",
    "SearchContext",
    "INFINITY",
    "compute_shortest_paths",
    "reconstruct_path",
]
