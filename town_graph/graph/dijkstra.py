"""Shortest-path computation using Dijkstra's algorithm.

All search state (distances, predecessors, the priority heap) lives in a
``SearchContext`` built fresh for every call, so a graph never carries
leftovers from a previous search.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Set, Tuple, Union

from ..domain.errors import InvalidArgumentError
from ..domain.models import Road, Town

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)

# Distance of a town that has not been reached.
INFINITY = float("inf")

Distance = Union[int, float]


@dataclass
class SearchContext:
    """Transient state of one single-source shortest path search.

    Attributes:
        source: Town the search started from
        distances: Best known distance per town (``INFINITY`` if unreached)
        previous: Predecessor of each town on its shortest path
        via: Road used to reach each town from its predecessor
        visited: Towns whose distance is final
    """

    source: Town
    distances: Dict[Town, Distance] = field(default_factory=dict)
    previous: Dict[Town, Optional[Town]] = field(default_factory=dict)
    via: Dict[Town, Road] = field(default_factory=dict)
    visited: Set[Town] = field(default_factory=set)

    def is_reachable(self, town: Town) -> bool:
        return self.distances.get(town, INFINITY) != INFINITY

    def distance_to(self, town: Town) -> Optional[int]:
        """Return the shortest distance to ``town``, or None if unreachable."""
        distance = self.distances.get(town, INFINITY)
        if distance == INFINITY:
            return None
        return int(distance)

    def path_to(self, destination: Town) -> List[Tuple[Town, Road, Town]]:
        """Return the ``(from, road, to)`` hops from the source to ``destination``.

        Empty when ``destination`` is the source itself or was never reached.
        """
        if destination == self.source:
            return []
        if destination not in self.visited or self.previous.get(destination) is None:
            return []

        hops: List[Tuple[Town, Road, Town]] = []
        town = destination
        while town != self.source:
            predecessor = self.previous[town]
            assert predecessor is not None
            hops.append((predecessor, self.via[town], town))
            town = predecessor

        hops.reverse()
        return hops


def compute_shortest_paths(graph: Graph, source: Town) -> SearchContext:
    """Compute shortest distances from ``source`` to every town in ``graph``.

    Every town is seeded into the heap at ``INFINITY`` and the source at 0.
    Re-prioritising a town pushes a fresh entry; stale entries are skipped
    when popped. The search stops as soon as the cheapest remaining entry
    is unreachable.

    Equal distances are popped in town-name order, which keeps the result
    reproducible.

    Raises:
        InvalidArgumentError: If ``source`` is unset.
    """
    if source is None:
        raise InvalidArgumentError("Source town cannot be None", argument="source")

    context = SearchContext(source=source)
    for town in graph.vertex_set():
        context.distances[town] = INFINITY
        context.previous[town] = None
    context.distances[source] = 0
    context.previous[source] = None

    heap: List[Tuple[Distance, Town]] = [
        (distance, town) for town, distance in context.distances.items()
    ]
    heapq.heapify(heap)

    while heap:
        distance, current = heapq.heappop(heap)

        if current in context.visited or distance > context.distances[current]:
            continue
        if distance == INFINITY:
            break

        context.visited.add(current)

        for road in sorted(graph.edges_of(current)):
            neighbour = road.other_endpoint(current)
            alternative = distance + road.weight
            if alternative < context.distances.get(neighbour, INFINITY):
                context.distances[neighbour] = alternative
                context.previous[neighbour] = current
                context.via[neighbour] = road
                heapq.heappush(heap, (alternative, neighbour))

    logger.debug(
        "Shortest paths computed",
        extra={"source": source.name, "reached": len(context.visited)},
    )
    return context


def format_step(predecessor: Town, road: Road, town: Town) -> str:
    return f"{predecessor} via {road.name} to {town} {road.weight} mi"


def reconstruct_path(graph: Graph, source: Town, destination: Town) -> List[str]:
    """Return the shortest path from ``source`` to ``destination`` as text steps.

    Each step reads ``"<from> via <road> to <to> <weight> mi"``. The result
    is empty when there is no path, and also when ``source`` and
    ``destination`` are the same town.
    """
    if source == destination:
        return []

    context = compute_shortest_paths(graph, source)
    steps = [format_step(*hop) for hop in context.path_to(destination)]

    logger.info(
        "Path reconstructed",
        extra={
            "source": source.name,
            "destination": getattr(destination, "name", None),
            "steps": len(steps),
            "distance": context.distance_to(destination),
        },
    )
    return steps
