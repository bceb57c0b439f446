"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextRoadRepository: Reads road records from ``roadName,weight;town1;town2`` files
"""

from .text_repository import TextRoadRepository, parse_line

__all__ = ["TextRoadRepository", "parse_line"]
