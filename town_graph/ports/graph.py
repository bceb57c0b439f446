"""Graph ports - Abstractions for the town graph and road ingestion.

These protocols define the contracts between the manager façade, the
graph container and the road file loader.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterator, List, Optional, Protocol, Sequence, Set, Union

if TYPE_CHECKING:
    from ..domain.models import Road, RoadRecord, Town
    from ..graph.dijkstra import SearchContext

PathLike = Union[str, Path]


class TownGraphPort(Protocol):
    """Port for the town graph.

    Implementation: graph/graph.py (Graph)

    This is the whole contract the manager façade relies on. Everything
    structural (deduplication, cascades, shortest paths) happens behind it.
    """

    def add_vertex(self, town: Town) -> bool:
        """Add a town if absent.

        Returns:
            True if the town was newly inserted.
        """
        ...

    def contains_vertex(self, town: Town) -> bool:
        ...

    def vertex_set(self) -> Set[Town]:
        """Return a copy of the town set."""
        ...

    def add_edge(self, source: Town, destination: Town, weight: int, name: str) -> Road:
        """Add a road between two towns already in the graph."""
        ...

    def get_edge(self, source: Town, destination: Town) -> Optional[Road]:
        """Return the road joining two towns in either order, or None."""
        ...

    def contains_edge(self, source: Town, destination: Town) -> bool:
        ...

    def edges_of(self, town: Town) -> Set[Road]:
        ...

    def edge_set(self) -> Set[Road]:
        """Return a copy of the road set."""
        ...

    def remove_edge(
        self, source: Town, destination: Town, weight: int, name: str
    ) -> Optional[Road]:
        """Remove the exactly matching road, or return None."""
        ...

    def remove_vertex(self, town: Town) -> bool:
        """Remove a town and every road touching it."""
        ...

    def compute_shortest_paths(self, source: Town) -> SearchContext:
        """Run a single-source shortest path search from ``source``."""
        ...

    def reconstruct_path(self, source: Town, destination: Town) -> List[str]:
        """Return the formatted steps of the shortest path."""
        ...


class RoadRepositoryPort(Protocol):
    """Port for reading road records from storage.

    Implementation: adapters/graph/text_repository.py (TextRoadRepository)
    """

    def iter_records(self, path: Optional[PathLike] = None) -> Iterator[RoadRecord]:
        """Yield well-formed road records, skipping malformed lines.

        Raises:
            GraphLoadError: If the file cannot be read.
        """
        ...

    def load_records(self, path: Optional[PathLike] = None) -> Sequence[RoadRecord]:
        """Read all well-formed road records from ``path``."""
        ...
