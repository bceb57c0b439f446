"""Domain models for the town graph.

Towns and roads are frozen dataclasses with slots. A town is identified by
its name alone. A road is undirected: it compares and hashes the same
whichever way round its endpoints were given.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .errors import InvalidArgumentError


@dataclass(frozen=True, slots=True, order=True)
class Town:
    """A named location in the road network.

    Equality, hashing and ordering use the exact, case-sensitive name.

    Attributes:
        name: Town name, the identity key
        adjacents: Locally cached neighbours. A convenience view only;
            the graph's adjacency index is authoritative.
    """

    name: str
    adjacents: List[Town] = field(
        default_factory=list, compare=False, hash=False, repr=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidArgumentError(
                f"Town name must be a string, got {type(self.name).__name__}",
                argument="name",
            )

    def add_adjacent_town(self, town: Town) -> None:
        self.adjacents.append(town)

    def remove_adjacent_town(self, town: Town) -> None:
        """Drop one cached occurrence of ``town``, if any."""
        if town in self.adjacents:
            self.adjacents.remove(town)

    def adjacent_towns(self) -> List[Town]:
        """Return a copy of the cached neighbours."""
        return list(self.adjacents)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, eq=False)
class Road:
    """An undirected, named, weighted connection between two towns.

    Two roads are equal when they join the same pair of towns (in either
    order) with the same weight and name. Roads sort by weight, then name.

    Attributes:
        source: One endpoint
        destination: The other endpoint
        weight: Non-negative length of the road in miles
        name: Road name
    """

    source: Town
    destination: Town
    weight: int
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.source, Town) or not isinstance(self.destination, Town):
            raise InvalidArgumentError(
                "Road endpoints must be towns", argument="source/destination"
            )
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise InvalidArgumentError(
                f"Road weight must be an integer, got {self.weight!r}",
                argument="weight",
            )
        if self.weight < 0:
            raise InvalidArgumentError(
                f"Road weight must be non-negative, got {self.weight}",
                argument="weight",
            )
        if not isinstance(self.name, str):
            raise InvalidArgumentError(
                f"Road name must be a string, got {self.name!r}", argument="name"
            )

    def connects(self, a: Town, b: Town) -> bool:
        """Check whether this road joins ``a`` and ``b``, in either order."""
        return (self.source == a and self.destination == b) or (
            self.source == b and self.destination == a
        )

    def other_endpoint(self, town: Town) -> Town:
        """Return the endpoint opposite ``town``.

        Raises:
            InvalidArgumentError: If ``town`` is not an endpoint of this road.
        """
        if self.source == town:
            return self.destination
        if self.destination == town:
            return self.source
        raise InvalidArgumentError(
            f"{town} is not an endpoint of road {self.name}", argument="town"
        )

    def _sort_key(self) -> tuple[int, str]:
        return (self.weight, self.name)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Road):
            return NotImplemented
        return (
            self.connects(other.source, other.destination)
            and self.weight == other.weight
            and self.name == other.name
        )

    def __hash__(self) -> int:
        # Endpoints in canonical order so a road and its reverse collide.
        low, high = sorted((self.source, self.destination))
        return hash((low, high, self.weight, self.name))

    def __lt__(self, other: Road) -> bool:
        if not isinstance(other, Road):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: Road) -> bool:
        if not isinstance(other, Road):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: Road) -> bool:
        if not isinstance(other, Road):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: Road) -> bool:
        if not isinstance(other, Road):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        return f"{self.source} to {self.destination} via {self.name} ({self.weight})"


@dataclass(frozen=True, slots=True)
class RoadRecord:
    """One parsed line of a road file (``roadName,weight;town1;town2``).

    Attributes:
        road_name: Name of the road
        weight: Length of the road in miles
        town1: Name of one endpoint
        town2: Name of the other endpoint
        line_number: 1-based line the record was read from (0 if unknown)
    """

    road_name: str
    weight: int
    town1: str
    town2: str
    line_number: int = field(default=0, compare=False)
