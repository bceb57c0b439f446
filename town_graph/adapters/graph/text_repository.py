"""Text road repository adapter.

Reads road files made of one record per line::

    roadName,weight;town1;town2

Ingestion is best effort: malformed lines (wrong field count, a weight
that is not a non-negative integer, empty names) are skipped and logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError
from ...domain.models import RoadRecord
from ...ports.graph import PathLike

FIELD_SEPARATOR = ";"
ROAD_SEPARATOR = ","


def _split(text: str, separator: str) -> List[str]:
    """Split on ``separator``, dropping trailing empty fields."""
    parts = text.split(separator)
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def parse_line(line: str, line_number: int = 0) -> Optional[RoadRecord]:
    """Parse one road file line.

    Returns:
        The parsed record, or None if the line is malformed.
    """
    fields = _split(line.rstrip("\r\n"), FIELD_SEPARATOR)
    if len(fields) != 3:
        return None

    road_fields = _split(fields[0], ROAD_SEPARATOR)
    if len(road_fields) != 2:
        return None

    road_name = road_fields[0].strip()
    town1 = fields[1].strip()
    town2 = fields[2].strip()
    if not road_name or not town1 or not town2:
        return None

    weight_text = road_fields[1].strip()
    if "_" in weight_text:
        return None
    try:
        weight = int(weight_text)
    except ValueError:
        return None
    if weight < 0:
        return None

    return RoadRecord(
        road_name=road_name,
        weight=weight,
        town1=town1,
        town2=town2,
        line_number=line_number,
    )


@dataclass
class TextRoadRepository:
    """Road repository that reads ``roadName,weight;town1;town2`` files.

    This adapter implements RoadRepositoryPort.

    Attributes:
        config: Graph configuration (default file, encoding)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def iter_records(self, path: Optional[PathLike] = None) -> Iterator[RoadRecord]:
        """Yield well-formed records from ``path`` one line at a time.

        Args:
            path: Road file to read. Defaults to the configured road file.

        Raises:
            GraphLoadError: If the file cannot be opened or read.
        """
        file_path = Path(path) if path is not None else self.config.roads_path
        self._logger.debug("Reading road file", extra={"path": str(file_path)})

        skipped = 0
        accepted = 0
        try:
            with file_path.open(encoding=self.config.encoding) as f:
                for line_number, line in enumerate(f, start=1):
                    if not line.strip():
                        continue
                    record = parse_line(line, line_number)
                    if record is None:
                        skipped += 1
                        self._logger.debug(
                            "Skipping malformed road line",
                            extra={"path": str(file_path), "line_number": line_number},
                        )
                        continue
                    accepted += 1
                    yield record
        except (OSError, UnicodeDecodeError) as e:
            raise GraphLoadError(
                f"Failed to read road file {file_path}",
                file_path=str(file_path),
                cause=e,
            )

        self._logger.info(
            "Road file read",
            extra={"path": str(file_path), "records": accepted, "skipped": skipped},
        )

    def load_records(self, path: Optional[PathLike] = None) -> List[RoadRecord]:
        """Read every well-formed record from ``path``."""
        return list(self.iter_records(path))
