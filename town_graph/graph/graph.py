"""In-memory town graph.

The graph owns three structures that must stay consistent:

- the town set,
- the road set,
- the adjacency index, mapping each town to the roads touching it.

Every road in the road set is listed under exactly its two endpoints in
the adjacency index, and both endpoints are in the town set.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Set

from ..domain.errors import InvalidArgumentError
from ..domain.models import Road, Town
from . import dijkstra
from .dijkstra import SearchContext


class Graph:
    """Undirected, weighted graph of towns joined by named roads.

    Implements TownGraphPort. Towns are deduplicated by name; roads are
    stored once and indexed under both endpoints.

    Example:
        graph = Graph()
        a, b = Town("A"), Town("B")
        graph.add_vertex(a)
        graph.add_vertex(b)
        graph.add_edge(a, b, 3, "Main St")
        graph.get_edge(b, a)  # the same road
    """

    def __init__(self) -> None:
        self._vertices: Dict[Town, Town] = {}
        self._edges: Set[Road] = set()
        self._adjacency: Dict[Town, List[Road]] = {}
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, town: object) -> bool:
        return town in self._vertices

    # ------------------------------------------------------------------
    # Towns
    # ------------------------------------------------------------------

    def add_vertex(self, town: Town) -> bool:
        """Add ``town`` unless an equal town is already present.

        Returns:
            True if the town was newly inserted, False otherwise.

        Raises:
            InvalidArgumentError: If ``town`` is None or not a Town.
        """
        self._require_town(town, "town")
        if town in self._vertices:
            return False

        self._vertices[town] = town
        self._adjacency[town] = []
        self._logger.debug("Town added", extra={"town": town.name})
        return True

    def contains_vertex(self, town: Town) -> bool:
        return town in self._vertices

    def get_vertex(self, town: Town) -> Optional[Town]:
        """Return the stored town equal to ``town``, or None."""
        return self._vertices.get(town)

    def vertex_set(self) -> Set[Town]:
        return set(self._vertices)

    def remove_vertex(self, town: Town) -> bool:
        """Remove ``town`` and every road touching it.

        Returns:
            True if the town was present and has been removed.

        Raises:
            InvalidArgumentError: If ``town`` is None.
        """
        self._require_town(town, "town")
        if town not in self._vertices:
            return False

        for road in list(self._adjacency[town]):
            self._unlink(road)

        del self._adjacency[town]
        del self._vertices[town]
        self._logger.debug("Town removed", extra={"town": town.name})
        return True

    # ------------------------------------------------------------------
    # Roads
    # ------------------------------------------------------------------

    def add_edge(self, source: Town, destination: Town, weight: int, name: str) -> Road:
        """Add a road between two towns that are already in the graph.

        Adding a road equal to an existing one (same towns, weight and
        name) returns the existing road and leaves the graph unchanged.

        Returns:
            The stored road.

        Raises:
            InvalidArgumentError: If an endpoint is None or absent from the
                graph, or if the weight is not a non-negative integer.
        """
        self._require_town(source, "source")
        self._require_town(destination, "destination")
        if source not in self._vertices or destination not in self._vertices:
            raise InvalidArgumentError(
                "Both towns must be added before adding a road",
                argument="source/destination",
            )

        stored_source = self._vertices[source]
        stored_destination = self._vertices[destination]
        road = Road(stored_source, stored_destination, weight, name)

        if road in self._edges:
            return next(existing for existing in self._edges if existing == road)

        # A self-loop is indexed once under its single town.
        for endpoint in self._endpoints(road):
            self._adjacency[endpoint].append(road)
        self._edges.add(road)
        stored_source.add_adjacent_town(stored_destination)
        if stored_destination is not stored_source:
            stored_destination.add_adjacent_town(stored_source)

        self._logger.debug(
            "Road added",
            extra={
                "road": name,
                "source": source.name,
                "destination": destination.name,
                "weight": weight,
            },
        )
        return road

    def get_edge(self, source: Town, destination: Town) -> Optional[Road]:
        """Return the first road joining the two towns in either order."""
        for road in self._adjacency.get(source, ()):
            if road.connects(source, destination):
                return road
        return None

    def contains_edge(self, source: Town, destination: Town) -> bool:
        return self.get_edge(source, destination) is not None

    def edges_of(self, town: Town) -> Set[Road]:
        """Return the roads touching ``town``; empty if the town is unknown."""
        return set(self._adjacency.get(town, ()))

    def edge_set(self) -> Set[Road]:
        return set(self._edges)

    def remove_edge(
        self, source: Town, destination: Town, weight: int, name: str
    ) -> Optional[Road]:
        """Remove the road between two towns if its weight and name match.

        A road joining the same towns with a different weight or name is
        left in place.

        Returns:
            The removed road, or None if nothing matched.
        """
        road = self.get_edge(source, destination)
        if road is None or road.weight != weight or road.name != name:
            return None

        self._unlink(road)
        self._logger.debug(
            "Road removed",
            extra={
                "road": name,
                "source": source.name,
                "destination": destination.name,
            },
        )
        return road

    # ------------------------------------------------------------------
    # Shortest paths
    # ------------------------------------------------------------------

    def compute_shortest_paths(self, source: Town) -> SearchContext:
        """Run Dijkstra from ``source`` and return the search state."""
        return dijkstra.compute_shortest_paths(self, source)

    def reconstruct_path(self, source: Town, destination: Town) -> List[str]:
        """Return the formatted steps of the shortest path between two towns."""
        return dijkstra.reconstruct_path(self, source, destination)

    def shortest_distance(self, source: Town, destination: Town) -> Optional[int]:
        """Return the length of the shortest path, or None if unreachable."""
        return self.compute_shortest_paths(source).distance_to(destination)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _endpoints(road: Road) -> tuple[Town, ...]:
        if road.source == road.destination:
            return (road.source,)
        return (road.source, road.destination)

    def _unlink(self, road: Road) -> None:
        for endpoint in self._endpoints(road):
            roads = self._adjacency.get(endpoint)
            if roads is not None and road in roads:
                roads.remove(road)
        self._edges.discard(road)
        road.source.remove_adjacent_town(road.destination)
        if road.destination is not road.source:
            road.destination.remove_adjacent_town(road.source)

    @staticmethod
    def _require_town(town: Town, argument: str) -> None:
        if town is None:
            raise InvalidArgumentError(f"{argument} cannot be None", argument=argument)
        if not isinstance(town, Town):
            raise InvalidArgumentError(
                f"{argument} must be a Town, got {type(town).__name__}",
                argument=argument,
            )
