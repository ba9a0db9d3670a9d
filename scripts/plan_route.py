#!/usr/bin/env python3
"""
Transit route planner CLI - minimum travel time between two stations.

Usage:
    python scripts/plan_route.py
    python scripts/plan_route.py --start Centro --end "Terminal Central"
    python scripts/plan_route.py --start 7 --end 5 --network data/transit.msgpack

Stations can be given by number or by name (case-insensitive). Missing
endpoints are asked for interactively.
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
    DEFAULT_NETWORK_PATH,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    TIE_BREAK_POLICIES,
    get_missing_data_files,
)
from wayfinder.data import load_network  # noqa: E402
from wayfinder.exceptions import (  # noqa: E402
    AllocationError,
    BoundsError,
    InvalidNetworkError,
    InvalidWeightError,
    MissingEndpointError,
)
from wayfinder.graph import TransitNetwork  # noqa: E402
from wayfinder.planner import RoutePlanner  # noqa: E402
from wayfinder.solvers import DijkstraSolver  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Plan the fastest public transport route",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--network",
        type=Path,
        default=DEFAULT_NETWORK_PATH,
        help=f"Network file, .json or .msgpack (default: {DEFAULT_NETWORK_PATH.name})",
    )
    parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="Departure station (number or name); prompted if omitted",
    )
    parser.add_argument(
        "--end",
        type=str,
        default=None,
        help="Destination station (number or name); prompted if omitted",
    )
    parser.add_argument(
        "--tie-break",
        type=str,
        default=None,
        choices=TIE_BREAK_POLICIES,
        help="Choice between equally distant stations (default: from config)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def ask_station(network: TransitNetwork, prompt: str, given: str | None) -> int:
    """Resolve a station from the command line, or prompt for one."""
    identifier = given if given is not None else input(prompt)
    return network.resolve(identifier)


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        network = load_network(args.network)
    except (InvalidNetworkError, InvalidWeightError, MissingEndpointError, BoundsError, ValueError) as e:
        print(f"Error: invalid network: {e}", file=sys.stderr)
        return 1
    except AllocationError as e:
        logger.critical(f"Cannot build transit network: {e.message}")
        return 2
    except OSError as e:
        print(f"Error: cannot read network: {e}", file=sys.stderr)
        if args.network == DEFAULT_NETWORK_PATH and "network" in get_missing_data_files():
            print(f"Sample network not found at {DEFAULT_NETWORK_PATH}", file=sys.stderr)
        return 1

    print("Welcome to the public transport route planner!")
    print("Available stations:")
    for idx, name in enumerate(network.stations()):
        print(f"{idx:2d}. {name}")
    print()

    try:
        start = ask_station(network, "Select the departure station (number or name): ", args.start)
        end = ask_station(network, "Select the destination station (number or name): ", args.end)
    except (BoundsError, MissingEndpointError) as e:
        print(f"Invalid station: {e.message}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nCancelled")
        return 130

    start_name = network.label(start)
    end_name = network.label(end)
    print(f"\nCalculating route from '{start_name}' to '{end_name}'...")

    planner = RoutePlanner(network.graph, labeler=network.label)
    result = planner.run(DijkstraSolver(tie_break=args.tie_break), start, end)

    print("\n" + "=" * 60)
    print("Route result")
    print("=" * 60)

    if start == end:
        print(f"You are already at '{start_name}'.")
        return 0

    if not result.found:
        print(f"There is no route from '{start_name}' to '{end_name}'.")
        return 1

    print(f"Minimum travel time from '{start_name}' to '{end_name}': {result.cost:g} minutes.")
    print("Best route:")
    print("-> " + result.format_path())
    print(f"\nComputed in {result.elapsed_ms:.2f} ms")

    return 0


if __name__ == "__main__":
    sys.exit(main())
