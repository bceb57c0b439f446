"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the manager façade, the graph
container and the road loader. They enable dependency injection and
make the system testable.
"""

from .graph import PathLike, RoadRepositoryPort, TownGraphPort

__all__ = [
    "PathLike",
    "TownGraphPort",
    "RoadRepositoryPort",
]
