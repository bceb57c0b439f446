"""Top-level package for the town graph project.

Models towns joined by weighted, named, two-way roads and answers
shortest-path queries over that network.
"""

from .domain import InvalidArgumentError, Road, Town, TownGraphError
from .graph import Graph, SearchContext
from .services import TownGraphManager

__all__ = [
    "Town",
    "Road",
    "Graph",
    "SearchContext",
    "TownGraphManager",
    "TownGraphError",
    "InvalidArgumentError",
]
