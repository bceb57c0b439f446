"""Services layer - Application orchestration.

Available services:
- TownGraphManager: String-keyed façade over the town graph
"""

from .town_graph_manager import TownGraphManager

__all__ = ["TownGraphManager"]
