"""Command line entry point.

Loads a road file into a fresh graph and prints towns, roads or the
shortest path between two towns::

    town-graph data/towns.txt --path Alpha Delta
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from .config import AppConfig, configure_logging, get_config
from .container import Container
from .domain.errors import ConfigurationError, GraphLoadError
from .services import TownGraphManager


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="town-graph",
        description="Load a road file and query shortest paths between towns.",
    )
    ap.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Road file with roadName,weight;town1;town2 lines (default: configured roads file)",
    )
    ap.add_argument(
        "--path",
        nargs=2,
        metavar=("FROM", "TO"),
        help="Print the shortest path between two towns",
    )
    ap.add_argument("--towns", action="store_true", help="List all towns")
    ap.add_argument("--roads", action="store_true", help="List all roads")
    ap.add_argument("--log-level", default=None, help="Override TG_LOG_LEVEL")
    return ap


def render(manager: TownGraphManager, args: argparse.Namespace) -> List[str]:
    """Build the output lines requested by ``args``."""
    show_all = not (args.path or args.towns or args.roads)
    lines: List[str] = []

    if args.towns or show_all:
        lines.append("Towns:")
        lines.extend(f"  {name}" for name in manager.all_towns())
    if args.roads or show_all:
        lines.append("Roads:")
        lines.extend(f"  {name}" for name in manager.all_roads())
    if args.path:
        start, end = args.path
        steps = manager.get_path(start, end)
        if steps:
            lines.append(f"Shortest path from {start} to {end}:")
            lines.extend(f"  {step}" for step in steps)
        else:
            lines.append(f"No path from {start} to {end}")

    return lines


def main(argv: Optional[Sequence[str]] = None, config: Optional[AppConfig] = None) -> int:
    args = build_parser().parse_args(argv)
    config = config or get_config()

    observability = config.observability
    if args.log_level:
        observability = observability.model_copy(update={"level": args.log_level})
    try:
        configure_logging(observability)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    manager: TownGraphManager = Container.create_default(config).resolve(TownGraphManager)
    try:
        manager.populate_town_graph(args.file)
    except GraphLoadError as e:
        print(f"Could not load roads: {e}", file=sys.stderr)
        return 1

    for line in render(manager, args):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
