"""
Pathfinder CLI - find the shortest path between two vertices.

Usage:
    find-path --start s --target t
    find-path --start s --target t --frontier scan --verbose
    find-path --graph data/roads.json --start Lviv --target Kyiv --stats
    find-path --graph data/roads.msgpack --start Lviv --target Kyiv --distances

Without --graph the built-in sample graph is used (or the file named by
the PATHFINDER_GRAPH environment variable).

Exit codes:
    0 - path found
    1 - target unreachable from start
    2 - unknown vertex, bad graph file, or bad option
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pathfinder import config
from pathfinder.data import build_sample_graph, load_graph
from pathfinder.exceptions import PathfinderError
from pathfinder.graph import Graph
from pathfinder.search import DijkstraEngine

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="find-path",
        description="Find the shortest path between two vertices of a weighted graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Name of the start vertex",
    )
    parser.add_argument(
        "--target",
        type=str,
        required=True,
        help="Name of the target vertex",
    )
    parser.add_argument(
        "--graph",
        type=Path,
        default=config.DEFAULT_GRAPH_PATH,
        help="Graph file (.json or .msgpack); default: built-in sample graph",
    )
    parser.add_argument(
        "--frontier",
        type=str,
        default=config.DEFAULT_FRONTIER,
        choices=config.FRONTIER_STRATEGIES,
        help=f"Frontier strategy (default: {config.DEFAULT_FRONTIER})",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print graph statistics before searching",
    )
    parser.add_argument(
        "--distances",
        action="store_true",
        help="Also print the distance from start to every reachable vertex",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def _load(graph_path: Path | None) -> Graph:
    if graph_path is None:
        logger.info("No graph file given, using the sample graph")
        return build_sample_graph()
    return load_graph(graph_path)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    try:
        log_level = logging.DEBUG if args.verbose else config.resolve_log_level(config.LOG_LEVEL)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(
        level=log_level,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATE_FORMAT,
    )

    try:
        graph = _load(args.graph)
        engine = DijkstraEngine(graph, frontier=args.frontier)
    except (FileNotFoundError, PathfinderError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("\n" + "=" * 60)
    print("Shortest Path")
    print("=" * 60)
    print(f"  Graph:    {args.graph or 'sample'}")
    print(f"  Start:    {args.start}")
    print(f"  Target:   {args.target}")
    print(f"  Frontier: {engine.frontier}")
    print("=" * 60 + "\n")

    if args.stats:
        print("Graph statistics:")
        for key, value in graph.stats().items():
            print(f"  {key}: {value:,}")
        print()

    try:
        result = engine.find_shortest_path(args.start, args.target)
        distances = engine.shortest_distances(args.start) if args.distances else None
    except PathfinderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if result.found:
        print(f"Path: {result.format()}")
        print(f"Total weight: {result.distance} ({result.hops} edges)")
    else:
        print(f"No path from '{result.start}' to '{result.end}'")

    if distances is not None:
        print("\nDistances from start:")
        for name, distance in distances.items():
            print(f"  {name}: {distance}")

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
