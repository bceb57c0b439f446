"""Typed domain errors for the town graph.

Programmer errors (unset towns, roads between unknown towns) are raised
immediately. Lookups that find nothing are not errors: they return
``None``, ``False`` or an empty collection instead.

All errors inherit from TownGraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TownGraphError(Exception):
    """Base error for the town graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidArgumentError(TownGraphError):
    """An operation was called with an argument it cannot accept.

    Raised for unset towns, roads whose endpoints are not in the graph
    and negative weights.

    Attributes:
        argument: Name of the offending argument
    """

    argument: str = ""


@dataclass
class GraphLoadError(TownGraphError):
    """A road file could not be read.

    Attributes:
        file_path: Path to the road file
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(TownGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
