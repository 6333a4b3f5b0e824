#!/usr/bin/env python3
"""
pathsearch CLI - find the shortest path between two nodes of a graph file.

Usage:
    python scripts/find_path.py --graph data/diamond.json --source A --target D
    python scripts/find_path.py --graph diamond.json --source A --target D --costs distance
    python scripts/find_path.py --graph roads.msgpack --source 12 --target 97 --weight-attribute length

Cost models:
    weighted - Edge attribute cost (default "weight", 1 when absent), zero heuristic
    distance - Euclidean edge length, straight-line heuristic (nodes need x/y positions)

Exit codes:
    0 - path found
    1 - no path between source and target
    2 - invalid input (missing file, unknown node, missing positions)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathsearch.config import DATA_DIR, DEFAULT_WEIGHT_ATTRIBUTE, LOG_LEVEL  # noqa: E402
from pathsearch.costs import get_costs  # noqa: E402
from pathsearch.data import load_graph  # noqa: E402
from pathsearch.exceptions import PathSearchError  # noqa: E402
from pathsearch.search import AStar  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find the shortest path between two nodes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--graph",
        type=Path,
        required=True,
        help=f"Graph file (.json or .msgpack); bare names are also looked up in {DATA_DIR}",
    )
    parser.add_argument(
        "--source",
        type=str,
        required=True,
        help="Identifier of the start node",
    )
    parser.add_argument(
        "--target",
        type=str,
        required=True,
        help="Identifier of the goal node",
    )
    parser.add_argument(
        "--costs",
        type=str,
        default="weighted",
        choices=["weighted", "distance"],
        help="Cost model to use (default: weighted)",
    )
    parser.add_argument(
        "--weight-attribute",
        type=str,
        default=DEFAULT_WEIGHT_ATTRIBUTE,
        help=f"Edge attribute for --costs weighted (default: {DEFAULT_WEIGHT_ATTRIBUTE})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def resolve_graph_path(path: Path) -> Path:
    """Fall back to the bundled data directory for relative paths that do not exist."""
    if path.exists() or path.is_absolute():
        return path
    candidate = DATA_DIR / path
    return candidate if candidate.exists() else path


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    cost_kwargs = {}
    if args.costs == "weighted":
        cost_kwargs["weight_attribute"] = args.weight_attribute
    costs = get_costs(args.costs, **cost_kwargs)

    try:
        graph = load_graph(resolve_graph_path(args.graph))
        astar = AStar(graph, costs=costs)
        astar.compute(args.source, args.target)
    except (OSError, ValueError, PathSearchError) as e:
        logger.error(f"Search failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("\n" + "=" * 60)
    print(f"  Source: {args.source}")
    print(f"  Target: {args.target}")
    print(f"  Costs:  {costs.name} - {costs.description}")
    print("=" * 60)

    if astar.no_path_found():
        print(f"No path from '{args.source}' to '{args.target}'")
        return 1

    path = astar.get_shortest_path()
    print("\nPath:")
    for i, node in enumerate(path.nodes):
        marker = " (SOURCE)" if i == 0 else " (TARGET)" if i == len(path) - 1 else ""
        print(f"  {i}. {node.id}{marker}")

    print(f"\nTotal cost: {path.cost:g} over {path.edge_count} edges")

    stats = astar.get_stats()
    print(f"Expanded {stats['expanded']} nodes ({stats['reopened']} re-opened)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
