"""
Weighted graph - command line entry point.

Usage:
    python -m weighted_graph A D
    python -m weighted_graph graph.txt A D --algorithm both
    python -m weighted_graph A F --file graph.json --format json --print --trace
    python -m weighted_graph --help
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import LOG_LEVELS, configure_logging, get_config
from .container import Container
from .domain.errors import ConfigurationError, WeightedGraphError
from .graph.render import format_graph, format_result
from .ports.graph import GraphRepositoryPort
from .services import PathFinderService

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weighted_graph",
        description="Search paths in a weighted graph loaded from a file.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        default=None,
        metavar="FILE",
        help="Graph description file (default: configured input path)",
    )
    parser.add_argument("start", help="Name of the start node")
    parser.add_argument("target", help="Name of the target node")
    parser.add_argument(
        "-f",
        "--file",
        dest="file_option",
        type=Path,
        default=None,
        help="Graph description file, same as FILE",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default=None,
        help="Graph file format (default: configured format)",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        choices=["dijkstra", "dfs", "both"],
        default=None,
        help="Search algorithm (default: configured algorithm)",
    )
    parser.add_argument(
        "--print", dest="print_graph", action="store_true", help="Print the graph first"
    )
    parser.add_argument(
        "--trace", action="store_true", help="Print the depth-first walk order"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = get_config()
    try:
        configure_logging(config.observability, level=args.log_level)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    updates = {}
    path = args.file_option or args.file
    if path is not None:
        updates["data_dir"] = path.parent
        updates["input_file"] = path.name
    if args.format is not None:
        updates["input_format"] = args.format
    if updates:
        config = config.model_copy(
            update={"graph": config.graph.model_copy(update=updates)}
        )

    container = Container.create_default(config)
    finder: PathFinderService = container.resolve(PathFinderService)

    try:
        graph = container.resolve(GraphRepositoryPort).load()
    except WeightedGraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.print_graph:
        sys.stdout.write(format_graph(graph))

    if args.trace:
        trace: List[str] = []
        graph.defise(args.start, args.target, trace=trace)
        if graph.search_state == "embedded":
            graph.unvisit(args.start)
        print("Walk: " + " ".join(trace))

    algorithm = args.algorithm or config.search.default_algorithm
    if algorithm == "both":
        results = finder.compare(args.start, args.target)
    else:
        results = {algorithm: finder.find_path_safe(args.start, args.target, algorithm)}

    for name, result in results.items():
        print(f" Searching ({name}): {args.start} -> {args.target}")
        print(format_result(result))

    return EXIT_FOUND if all(r.found for r in results.values()) else EXIT_NO_PATH


if __name__ == "__main__":
    sys.exit(main())
