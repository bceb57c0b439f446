"""Domain layer - Core value types and errors.

This module contains the town and road value types and the typed
errors used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphLoadError,
    InvalidArgumentError,
    TownGraphError,
)
from .models import Road, RoadRecord, Town

__all__ = [
    # Models
    "Town",
    "Road",
    "RoadRecord",
    # Errors
    "TownGraphError",
    "InvalidArgumentError",
    "GraphLoadError",
    "ConfigurationError",
]
