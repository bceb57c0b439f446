"""Town graph manager - String-keyed façade over the graph.

Callers deal in plain town and road names. The manager turns them into
Town values, delegates all structural work to the graph, and formats the
results back into strings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.errors import InvalidArgumentError
from ..domain.models import Town
from ..graph.graph import Graph
from ..ports.graph import PathLike, RoadRepositoryPort, TownGraphPort


def _town(name: str, argument: str = "name") -> Town:
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError(
            f"Town name must be a non-empty string, got {name!r}",
            argument=argument,
        )
    return Town(name)


@dataclass
class TownGraphManager:
    """Manage towns and roads by name.

    Attributes:
        graph: The town graph all operations delegate to
        road_repository: Source of road records for populate_town_graph()
    """

    graph: TownGraphPort = field(default_factory=Graph)
    road_repository: Optional[RoadRepositoryPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # Towns

    def add_town(self, name: str) -> bool:
        """Add a town; False if it is already in the graph."""
        return self.graph.add_vertex(_town(name))

    def get_town(self, name: str) -> Optional[Town]:
        """Return the stored town called ``name``, or None."""
        for town in self.graph.vertex_set():
            if town.name == name:
                return town
        return None

    def contains_town(self, name: str) -> bool:
        return self.graph.contains_vertex(_town(name))

    def delete_town(self, name: str) -> bool:
        """Remove a town and every road touching it."""
        return self.graph.remove_vertex(_town(name))

    def all_towns(self) -> List[str]:
        """Return every town name, sorted."""
        return sorted(town.name for town in self.graph.vertex_set())

    # Roads

    def add_road(self, town1: str, town2: str, weight: int, road_name: str) -> bool:
        """Add a road, creating either town if it does not exist yet.

        Returns:
            True once the road is in the graph.
        """
        one = _town(town1, "town1")
        two = _town(town2, "town2")
        if not self.graph.contains_vertex(one):
            self.graph.add_vertex(one)
        if not self.graph.contains_vertex(two):
            self.graph.add_vertex(two)
        return self.graph.add_edge(one, two, weight, road_name) is not None

    def get_road(self, town1: str, town2: str) -> Optional[str]:
        """Return the name of the road between two towns, or None."""
        road = self.graph.get_edge(_town(town1, "town1"), _town(town2, "town2"))
        return road.name if road is not None else None

    def contains_road_connection(self, town1: str, town2: str) -> bool:
        return self.graph.get_edge(_town(town1, "town1"), _town(town2, "town2")) is not None

    def all_roads(self) -> List[str]:
        """Return every road name, sorted."""
        return sorted(road.name for road in self.graph.edge_set())

    def delete_road_connection(self, town1: str, town2: str, road_name: str) -> bool:
        """Remove the road between two towns if it is called ``road_name``.

        Returns:
            True if a road was removed.
        """
        one = _town(town1, "town1")
        two = _town(town2, "town2")
        road = self.graph.get_edge(one, two)
        if road is None or road.name != road_name:
            return False
        return self.graph.remove_edge(one, two, road.weight, road_name) is not None

    # Paths

    def get_path(self, town1: str, town2: str) -> List[str]:
        """Return the shortest path as ``"<from> via <road> to <to> <n> mi"`` steps."""
        return self.graph.reconstruct_path(_town(town1, "town1"), _town(town2, "town2"))

    # Ingestion

    def populate_town_graph(self, path: Optional[PathLike] = None) -> int:
        """Load roads from a ``roadName,weight;town1;town2`` file.

        Malformed lines are skipped. Loading is not transactional: if the
        file fails part way, roads read before the failure stay in the graph.

        Args:
            path: Road file to read. Defaults to the repository's configured file.

        Returns:
            Number of records applied.

        Raises:
            GraphLoadError: If the file cannot be read.
        """
        repository = self.road_repository
        if repository is None:
            from ..adapters.graph import TextRoadRepository

            repository = TextRoadRepository()
            self.road_repository = repository

        applied = 0
        for record in repository.iter_records(path):
            self.add_road(record.town1, record.town2, record.weight, record.road_name)
            applied += 1

        self._logger.info(
            "Town graph populated",
            extra={"roads_applied": applied, "towns": len(self.graph.vertex_set())},
        )
        return applied
