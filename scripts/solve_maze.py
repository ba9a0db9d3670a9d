#!/usr/bin/env python3
"""
Maze solver CLI - find a path from S to E in a grid maze.

Usage:
    python scripts/solve_maze.py
    python scripts/solve_maze.py --maze mazes/big.txt --solver bfs --show
    python scripts/solve_maze.py --solver all -v

Maze format:
    '#' is a wall, 'S' the start, 'E' the end; any other character is open.

Solvers:
    bfs      - Shortest path by number of steps
    dfs      - Some path (depth first, not necessarily shortest)
    dijkstra - Minimum cost (all steps cost 1 in a maze)
    all      - Run every solver and compare
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv  # noqa: E402

load_dotenv(project_root / ".env")

from wayfinder.config import (  # noqa: E402
    DEFAULT_MAZE_PATH,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    get_missing_data_files,
)
from wayfinder.data import load_maze  # noqa: E402
from wayfinder.exceptions import (  # noqa: E402
    AllocationError,
    InvalidMazeError,
    MissingEndpointError,
)
from wayfinder.graph import build_maze_graph  # noqa: E402
from wayfinder.planner import RoutePlanner  # noqa: E402
from wayfinder.solvers import SOLVER_NAMES, get_solver  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a path through a maze",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--maze",
        type=Path,
        default=DEFAULT_MAZE_PATH,
        help=f"Maze text file (default: {DEFAULT_MAZE_PATH.name})",
    )
    parser.add_argument(
        "--solver",
        type=str,
        default="both",
        choices=[*SOLVER_NAMES, "both", "all"],
        help="Solver to run (default: both = bfs and dfs)",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Draw each path over the maze",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        maze = load_maze(args.maze)
        maze_graph = build_maze_graph(maze)
    except (MissingEndpointError, InvalidMazeError) as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except AllocationError as e:
        logger.critical(f"Cannot build maze graph: {e.message}")
        return 2
    except OSError as e:
        print(f"Error: cannot read maze: {e}", file=sys.stderr)
        if args.maze == DEFAULT_MAZE_PATH and "maze" in get_missing_data_files():
            print(f"Sample maze not found at {DEFAULT_MAZE_PATH}", file=sys.stderr)
        return 1

    if args.solver == "all":
        names = list(SOLVER_NAMES)
    elif args.solver == "both":
        names = ["bfs", "dfs"]
    else:
        names = [args.solver]

    print("Maze:")
    print(maze.render())

    planner = RoutePlanner(maze_graph.graph, labeler=maze_graph.label)
    results = planner.compare(
        [get_solver(name) for name in names],
        maze_graph.start_node,
        maze_graph.end_node,
    )

    for result in results:
        print("\n" + "=" * 60)
        print(f"{result.solver_name.upper()}")
        print("=" * 60)
        if not result.found:
            print("No path found.")
            continue
        print(f"Path found ({result.hops} steps):")
        print(result.format_path())
        if args.show:
            print()
            print(maze.render(maze_graph.cell_of(node) for node in result.path))

    return 0 if all(result.found for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
